"""Interactive modal text editor application.

This module provides the EditorApp that ties together:
- Terminal: raw-mode input and single-write frame output
- KeyDecoder: bytes to key events
- Dispatcher: Normal/Insert bindings, prompts, commands and search
- Renderer: text view, status bar and message bar

Keyboard Controls:
    Normal mode:
        h j k l / arrows: Move cursor
        0 $: Start / end of line
        i a o O C: Enter Insert mode
        x D r<c>: Delete char, delete to end of line, replace char
        f F t T <c>: Find char in line
        /: Search, n N: next / previous match
        :: Command prompt (:w, :q, :q!, :wq)

    Insert mode:
        Type to insert, Enter splits the line, Backspace/Delete remove
        Esc: Back to Normal mode
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ContextManager, Optional, Protocol

from termedit.cli.core.input import KeyDecoder
from termedit.cli.core.terminal import Terminal, TerminalSize
from termedit.cli.editor.dispatcher import Dispatcher
from termedit.cli.editor.render import Renderer
from termedit.cli.editor.state import EditorState
from termedit.config import Settings
from termedit.core.document import Document
from termedit.io.reader import load

logger = logging.getLogger(__name__)


class TerminalLike(Protocol):
    """The parts of Terminal the editor loop uses."""

    def managed_mode(self) -> ContextManager[object]: ...

    def query_geometry(self) -> TerminalSize: ...

    def read_byte(self) -> int: ...

    def poll_byte(self) -> int | None: ...

    def write_frame(self, data: bytes) -> None: ...


class EditorApp:
    """
    Terminal text editor.

    One document, one terminal. The terminal is put in raw mode on an
    alternate screen for the duration of ``run`` and restored on every
    exit path, including exceptions.
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        terminal: Optional[TerminalLike] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.terminal: TerminalLike = terminal if terminal is not None else Terminal()
        self.state = EditorState(
            document=document if document is not None else Document(),
            settings=settings if settings is not None else Settings(),
        )
        self.keys = KeyDecoder(self.terminal)
        self.renderer = Renderer(self.state, self.terminal)
        self.dispatcher = Dispatcher(self.state, self.keys, self.refresh)

    @classmethod
    def open(
        cls,
        path: Optional[Path] = None,
        terminal: Optional[TerminalLike] = None,
        settings: Optional[Settings] = None,
    ) -> EditorApp:
        """Create an editor for path, or an empty unnamed buffer."""
        settings = settings if settings is not None else Settings()
        document = load(path, settings.syntax_dir) if path is not None else Document()
        return cls(document, terminal, settings)

    @property
    def running(self) -> bool:
        return self.state.running

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def refresh(self) -> None:
        """Re-read the window size and redraw."""
        self.state.resize(self.terminal.query_geometry())
        self.renderer.refresh()

    def run(self) -> None:
        """Run the editor until the user quits."""
        self.state.running = True
        logger.info("Editor started on %s", self.state.document.filename or "a new buffer")

        with self.terminal.managed_mode():
            while self.state.running:
                self.refresh()
                self.dispatcher.handle(self.keys.read_key())

        logger.info("Editor stopped")


def run_editor(path: Optional[Path] = None, settings: Optional[Settings] = None) -> None:
    """Launch the editor application.

    Args:
        path: Optional file path to open
        settings: Settings to use instead of the user's settings.json
    """
    app = EditorApp.open(path, settings=settings)
    app.run()
