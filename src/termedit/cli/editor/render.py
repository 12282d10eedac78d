"""Frame composition: text view, status bar and message bar in one write."""

from __future__ import annotations

from typing import Protocol

from termedit.cli.editor.cursor import scroll
from termedit.cli.editor.state import EditorState, Mode
from termedit.cli.widgets.base import Rect
from termedit.cli.widgets.message_bar import MessageBarWidget
from termedit.cli.widgets.status_bar import StatusBarWidget
from termedit.cli.widgets.text_view import TextViewWidget
from termedit.core.constants import CLEAR_LINE, CSI, CURSOR_HOME, HIDE_CURSOR, SHOW_CURSOR

NO_NAME = "[No Name]"


class FrameSink(Protocol):
    """Anything that accepts a finished frame (the Terminal, or a test double)."""

    def write_frame(self, data: bytes) -> None: ...


class Renderer:
    """Builds each frame from the editor state and hands it to the terminal."""

    def __init__(self, state: EditorState, sink: FrameSink) -> None:
        self.state = state
        self.sink = sink
        self.text_view = TextViewWidget(state.document)
        self.status_bar = StatusBarWidget()
        self.message_bar = MessageBarWidget()

    def status_text(self) -> tuple[str, str]:
        """Left and right halves of the status bar."""
        doc = self.state.document
        name = str(doc.filename) if doc.filename is not None else NO_NAME
        left = f"{name[:20]} - {doc.num_rows} lines"
        if doc.dirty:
            left += " (modified)"
        right = f"{self.state.cursor.y + 1},{self.state.cursor.rx + 1}"
        return left, right

    def cursor_position(self) -> tuple[int, int]:
        """1-based screen (row, column) for the terminal cursor."""
        state = self.state
        if state.mode == Mode.PROMPT and state.prompt is not None:
            return state.viewport.height + 2, len(state.prompt.prefix) + state.prompt.pos + 1
        view = state.viewport
        return (
            state.cursor.y - view.row_offset + 1,
            state.cursor.rx - view.col_offset + state.document.gutter_width + 1,
        )

    def compose(self) -> str:
        """Scroll, then build the complete escape-coded frame."""
        state = self.state
        scroll(state)
        view = state.viewport

        # The document may have been replaced since the last frame
        self.text_view.document = state.document
        self.text_view.scroll_to(view.row_offset, view.col_offset)
        left, right = self.status_text()
        self.status_bar.set_left(left)
        self.status_bar.set_right(right)
        self.message_bar.set_message(state.message.text, state.message.fg, state.message.bg)

        parts = [HIDE_CURSOR, CURSOR_HOME]
        for line in self.text_view.render(Rect(0, 0, view.width, view.height)):
            parts.append(f"{line}{CLEAR_LINE}\r\n")
        for line in self.status_bar.render(Rect(0, view.height, view.width, 1)):
            parts.append(f"{line}\r\n")
        for line in self.message_bar.render(Rect(0, view.height + 1, view.width, 1)):
            parts.append(f"{CLEAR_LINE}{line}")

        row, col = self.cursor_position()
        parts.append(f"{CSI}{row};{col}H")
        parts.append(SHOW_CURSOR)
        return "".join(parts)

    def refresh(self) -> None:
        """Draw one frame with a single write."""
        frame = self.compose()
        self.sink.write_frame(frame.encode("utf-8", errors="surrogateescape"))
