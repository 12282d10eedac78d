"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

import pytest

from termedit.cli.core.terminal import TerminalSize
from termedit.cli.editor.app import EditorApp
from termedit.config import Settings
from termedit.core.document import Document
from termedit.errors import TerminalError


class ScriptedTerminal:
    """
    In-memory stand-in for Terminal.

    Input comes from a byte script; every frame written is kept. Reading
    past the end of the script raises TerminalError, which ends a run
    that never quit.
    """

    def __init__(self, script: bytes | str = b"", rows: int = 24, cols: int = 80) -> None:
        self.pending = bytearray()
        self.size = TerminalSize(rows, cols)
        self.frames: list[bytes] = []
        self.in_managed_mode = False
        self.restore_count = 0
        self.feed(script)

    def feed(self, script: bytes | str) -> None:
        if isinstance(script, str):
            script = script.encode("utf-8")
        self.pending.extend(script)

    @contextmanager
    def managed_mode(self) -> Iterator[ScriptedTerminal]:
        self.in_managed_mode = True
        try:
            yield self
        finally:
            self.in_managed_mode = False
            self.restore_count += 1

    def query_geometry(self) -> TerminalSize:
        return self.size

    def read_byte(self) -> int:
        if not self.pending:
            raise TerminalError("input script exhausted")
        return self.pending.pop(0)

    def poll_byte(self) -> Optional[int]:
        if not self.pending:
            return None
        return self.pending.pop(0)

    def write_frame(self, data: bytes) -> None:
        self.frames.append(data)

    @property
    def last_frame(self) -> str:
        return self.frames[-1].decode("utf-8") if self.frames else ""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temporary location for every test."""
    config = tmp_path / "config"
    monkeypatch.setenv("TERMEDIT_CONFIG_DIR", str(config))
    return config


@pytest.fixture
def settings(isolated_config: Path) -> Settings:
    return Settings(
        log_file=isolated_config / "termedit.log",
        syntax_dir=isolated_config / "syntax",
    )


@pytest.fixture
def terminal() -> ScriptedTerminal:
    return ScriptedTerminal(rows=10, cols=40)


@pytest.fixture
def make_editor(terminal: ScriptedTerminal, settings: Settings) -> Callable[..., EditorApp]:
    """Build an editor over the scripted terminal with the given lines."""

    def factory(lines: Optional[list[str]] = None, filename: Optional[Path] = None) -> EditorApp:
        doc = Document.from_lines(lines or [], filename=filename)
        app = EditorApp(doc, terminal=terminal, settings=settings)
        app.refresh()
        return app

    return factory


def _press(app: EditorApp, script: bytes | str) -> None:
    app.terminal.feed(script)
    while app.terminal.pending and app.state.running:
        app.dispatcher.handle(app.keys.read_key())


@pytest.fixture
def press() -> Callable[[EditorApp, bytes | str], None]:
    """Feed keys to an editor and dispatch until the script is used up."""
    return _press
