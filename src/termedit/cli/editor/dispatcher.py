"""Modal key dispatch: Normal and Insert mode bindings."""

from __future__ import annotations

from typing import Callable, assert_never

from termedit.cli.core.input import Key, KeyDecoder, KeyEvent
from termedit.cli.editor import commands, cursor
from termedit.cli.editor.prompt import Prompter
from termedit.cli.editor.search import SearchEngine
from termedit.cli.editor.state import EditorState, Mode, PromptKind


ARROWS = (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT)


class Dispatcher:
    """
    Applies key events to the editor state.

    Normal mode binds single letters (vi style); Insert mode types text.
    Keys that need a follow-up character (``r``, ``f`` and friends) and the
    ``:``/``/`` prompts read further keys directly from the decoder.
    """

    def __init__(self, state: EditorState, keys: KeyDecoder, redraw: Callable[[], None]) -> None:
        self.state = state
        self.keys = keys
        self.prompter = Prompter(state, keys, redraw)
        self.search = SearchEngine(state)

        self._normal_bindings: dict[str, Callable[[], object]] = {
            "h": lambda: cursor.move_cursor(self.state, Key.LEFT),
            "j": lambda: cursor.move_cursor(self.state, Key.DOWN),
            "k": lambda: cursor.move_cursor(self.state, Key.UP),
            "l": lambda: cursor.move_cursor(self.state, Key.RIGHT),
            "0": lambda: cursor.home(self.state),
            "$": lambda: cursor.end(self.state),
            "i": self.state.enter_insert,
            "a": self._append,
            "o": lambda: self._open_line(below=True),
            "O": lambda: self._open_line(below=False),
            "D": self._delete_to_end,
            "C": self._change_to_end,
            "x": self._delete_under_cursor,
            "r": self._replace_char,
            "f": lambda: self._find_in_row(forward=True, short=False),
            "t": lambda: self._find_in_row(forward=True, short=True),
            "F": lambda: self._find_in_row(forward=False, short=False),
            "T": lambda: self._find_in_row(forward=False, short=True),
            "/": self._search_prompt,
            ":": self._command_prompt,
            "n": self.search.next,
            "N": self.search.prev,
        }

    def handle(self, event: KeyEvent) -> None:
        """Process one key according to the current mode."""
        match self.state.mode:
            case Mode.NORMAL:
                self._handle_normal(event)
            case Mode.INSERT:
                self._handle_insert(event)
            case Mode.PROMPT:
                # The prompt runs its own loop; a key can only get here if a
                # prompt was abandoned by an exception.
                self.state.mode = Mode.NORMAL
            case _:
                assert_never(self.state.mode)

    # -------------------------------------------------------------------------
    # Mode handlers
    # -------------------------------------------------------------------------

    def _handle_normal(self, event: KeyEvent) -> None:
        if event.is_char:
            action = self._normal_bindings.get(event.char)
            if action is not None:
                action()
            return
        if event.key == Key.BACKSPACE:
            return
        self._handle_common(event)

    def _handle_insert(self, event: KeyEvent) -> None:
        state = self.state
        if event.is_char:
            self._insert_char(event.char)
        elif event.key == Key.TAB:
            self._insert_char("\t")
        elif event.key == Key.ENTER:
            state.document.split_row(state.cursor.y, state.cursor.x)
            state.cursor.y += 1
            state.cursor.x = 0
        elif event.key == Key.BACKSPACE:
            self._delete_backward()
        else:
            self._handle_common(event)

    def _handle_common(self, event: KeyEvent) -> None:
        """Keys that behave the same in Normal and Insert mode."""
        key = event.key
        if key in ARROWS:
            cursor.move_cursor(self.state, key)
        elif key in (Key.PAGE_UP, Key.PAGE_DOWN):
            cursor.page(self.state, key)
        elif key == Key.HOME:
            cursor.home(self.state)
        elif key == Key.END:
            cursor.end(self.state)
        elif key == Key.ESCAPE:
            self.state.enter_normal()
        elif key == Key.DELETE:
            self._delete_forward()

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def _insert_char(self, ch: str) -> None:
        state = self.state
        state.document.insert_char(state.cursor.y, state.cursor.x, ch)
        state.cursor.x += 1

    def _delete_backward(self) -> None:
        state = self.state
        state.cursor.x, state.cursor.y = state.document.delete_char(state.cursor.y, state.cursor.x)

    def _delete_forward(self) -> None:
        state = self.state
        row = state.current_row
        if row is None:
            return
        if state.cursor.x < row.size:
            state.document.delete_char(state.cursor.y, state.cursor.x + 1)
        elif state.cursor.y + 1 < state.document.num_rows:
            # Join the next row onto this one; the cursor stays put
            state.document.delete_char(state.cursor.y + 1, 0)

    def _append(self) -> None:
        row = self.state.current_row
        if row is not None and self.state.cursor.x < row.size:
            self.state.cursor.x += 1
        self.state.enter_insert()

    def _open_line(self, below: bool) -> None:
        state = self.state
        if below and state.cursor.y < state.document.num_rows:
            state.cursor.y += 1
        state.document.insert_row(state.cursor.y, "")
        state.cursor.x = 0
        state.enter_insert()

    def _delete_to_end(self) -> None:
        state = self.state
        state.document.truncate_row(state.cursor.y, state.cursor.x)
        if state.cursor.x > 0:
            state.cursor.x -= 1

    def _change_to_end(self) -> None:
        state = self.state
        state.document.truncate_row(state.cursor.y, state.cursor.x)
        state.enter_insert()

    def _delete_under_cursor(self) -> None:
        state = self.state
        row = state.current_row
        if row is None or state.cursor.x >= row.size:
            return
        state.document.delete_char(state.cursor.y, state.cursor.x + 1)
        cursor.clamp_x(state)

    def _replace_char(self) -> None:
        event = self.keys.read_key()
        if event.is_char:
            self.state.document.replace_char(self.state.cursor.y, self.state.cursor.x, event.char)

    def _find_in_row(self, forward: bool, short: bool) -> None:
        """Move to the next (or previous) occurrence of a typed character in the row."""
        event = self.keys.read_key()
        row = self.state.current_row
        if not event.is_char or row is None:
            return
        x = self.state.cursor.x
        if forward:
            found = row.chars.find(event.char, x + 1)
            if found != -1:
                self.state.cursor.x = found - 1 if short else found
        else:
            found = row.chars.rfind(event.char, 0, x)
            if found != -1:
                self.state.cursor.x = found + 1 if short else found

    # -------------------------------------------------------------------------
    # Prompts
    # -------------------------------------------------------------------------

    def _search_prompt(self) -> None:
        query = self.prompter.ask(PromptKind.SEARCH, "/")
        if query:
            self.search.search(query)

    def _command_prompt(self) -> None:
        line = self.prompter.ask(PromptKind.COMMAND, ":")
        if line is not None:
            commands.execute(self.state, self.prompter, line)
