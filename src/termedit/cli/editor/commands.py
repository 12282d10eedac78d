"""Ex-style commands entered at the ``:`` prompt."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from termedit.cli.editor.prompt import Prompter
from termedit.cli.editor.state import EditorState, PromptKind
from termedit.config import load_rules
from termedit.io.writer import save

logger = logging.getLogger(__name__)

NO_WRITE = "No write since last change (add ! to override)"
SAVE_AS_PREFIX = "Save as: "


def rename(state: EditorState, name: str | Path) -> None:
    """Give the document a new file name and pick rules for its extension."""
    path = Path(name).expanduser()
    state.document.filename = path
    state.document.set_rules(load_rules(path.suffix, state.settings.syntax_dir))


def save_document(state: EditorState, prompter: Prompter, name: str | None = None) -> bool:
    """
    Write the document, asking for a file name if it has none.

    A new name is only adopted once the write succeeds. Failures are
    reported in the message bar and leave the buffer as it was. Returns
    True if the file was written.
    """
    doc = state.document
    if not name and doc.filename is None:
        name = prompter.ask(PromptKind.SAVE_AS, SAVE_AS_PREFIX)
        if not name:
            state.message.set("Save aborted")
            return False

    path = Path(name).expanduser() if name else doc.filename
    try:
        written = save(doc, path)
    except OSError as e:
        logger.error("Saving %s failed: %s", path, e)
        state.message.warn(f"Can't save! I/O error: {e.strerror or e}")
        return False

    if path != doc.filename:
        rename(state, path)
    state.message.set(f'"{doc.filename}" {doc.num_rows}L, {written} bytes written')
    return True


def quit_editor(state: EditorState, force: bool = False) -> None:
    """Stop the editor unless there are unsaved changes and force is off."""
    if state.document.dirty and not force:
        state.message.warn(NO_WRITE)
        return
    logger.info("Quitting%s", " without saving" if state.document.dirty else "")
    state.running = False


# -----------------------------------------------------------------------------
# Command table
# -----------------------------------------------------------------------------

Command = Callable[[EditorState, Prompter, list[str]], None]


def _quit(state: EditorState, prompter: Prompter, args: list[str]) -> None:
    quit_editor(state)


def _force_quit(state: EditorState, prompter: Prompter, args: list[str]) -> None:
    quit_editor(state, force=True)


def _write(state: EditorState, prompter: Prompter, args: list[str]) -> None:
    save_document(state, prompter, args[0] if args else None)


def _write_quit(state: EditorState, prompter: Prompter, args: list[str]) -> None:
    if save_document(state, prompter, args[0] if args else None):
        quit_editor(state)


COMMANDS: dict[str, Command] = {
    "q": _quit,
    "quit": _quit,
    "q!": _force_quit,
    "quit!": _force_quit,
    "w": _write,
    "write": _write,
    "wq": _write_quit,
    "x": _write_quit,
}


def execute(state: EditorState, prompter: Prompter, line: str) -> None:
    """Run one command line such as ``w notes.txt``."""
    parts = line.split()
    if not parts:
        return
    name, args = parts[0], parts[1:]
    command = COMMANDS.get(name)
    if command is None:
        state.message.warn(f"Not an editor command: {line.strip()}")
        return
    logger.debug("Command %r", line)
    command(state, prompter, args)
