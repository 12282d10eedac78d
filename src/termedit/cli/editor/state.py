"""Editor state shared by the dispatcher, search engine and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from termedit.cli.core.terminal import TerminalSize
from termedit.config import Settings
from termedit.core.constants import BG_OFFSET, COLORS_8, DEFAULT_BG, RESERVED_ROWS
from termedit.core.document import Document
from termedit.core.row import Row

DEFAULT_MESSAGE_FG = COLORS_8["white"]


class Mode(Enum):
    """Input modes."""
    NORMAL = auto()
    INSERT = auto()
    PROMPT = auto()


class PromptKind(Enum):
    """What an open prompt is collecting."""
    COMMAND = auto()
    SEARCH = auto()
    SAVE_AS = auto()


@dataclass
class Cursor:
    """Logical cursor; rx is the render column derived from x each frame."""
    x: int = 0
    y: int = 0
    rx: int = 0


@dataclass
class Viewport:
    """Scroll offsets and the screen area available for text."""
    row_offset: int = 0
    col_offset: int = 0
    height: int = 0
    width: int = 0

    def text_width(self, gutter: int) -> int:
        return max(0, self.width - gutter)


@dataclass
class SearchState:
    """Last search query and where it last matched (render column)."""
    query: str = ""
    anchor_row: int = 0
    anchor_col: int = 0

    @property
    def active(self) -> bool:
        return bool(self.query)


@dataclass
class Message:
    """Message bar contents."""
    text: str = ""
    fg: int = DEFAULT_MESSAGE_FG
    bg: int = DEFAULT_BG

    def set(self, text: str, fg: int = DEFAULT_MESSAGE_FG, bg: int = DEFAULT_BG) -> None:
        self.text = text
        self.fg = fg
        self.bg = bg

    def warn(self, text: str) -> None:
        """White on blue, for refusals and failures."""
        self.set(text, COLORS_8["white"], COLORS_8["blue"] + BG_OFFSET)

    def clear(self) -> None:
        self.set("")


@dataclass
class PromptState:
    """Text being typed into an open prompt; pos is relative to the text."""
    kind: PromptKind
    prefix: str
    text: str = ""
    pos: int = 0


@dataclass
class EditorState:
    """
    Everything the editor knows, built once at startup.

    The dispatcher mutates it, the renderer only reads it. ``running``
    goes False when the user quits.
    """
    document: Document = field(default_factory=Document)
    settings: Settings = field(default_factory=Settings)
    cursor: Cursor = field(default_factory=Cursor)
    viewport: Viewport = field(default_factory=Viewport)
    mode: Mode = Mode.NORMAL
    prompt: PromptState | None = None
    search: SearchState = field(default_factory=SearchState)
    message: Message = field(default_factory=Message)
    running: bool = True

    def resize(self, size: TerminalSize) -> None:
        """Fit the viewport to the terminal, keeping room for the two bars."""
        self.viewport.height = max(0, size.rows - RESERVED_ROWS)
        self.viewport.width = size.cols

    @property
    def current_row(self) -> Row | None:
        """Row under the cursor, or None past the end of the document."""
        if self.cursor.y < self.document.num_rows:
            return self.document[self.cursor.y]
        return None

    def enter_insert(self) -> None:
        self.mode = Mode.INSERT
        self.message.set("-- INSERT --")

    def enter_normal(self) -> None:
        self.mode = Mode.NORMAL
        self.message.clear()
