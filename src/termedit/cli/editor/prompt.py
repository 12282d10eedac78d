"""Single-line prompt shown in the message bar."""

from __future__ import annotations

import logging
from typing import Callable

from termedit.cli.core.input import Key, KeyDecoder
from termedit.cli.editor.state import EditorState, Mode, PromptKind, PromptState

logger = logging.getLogger(__name__)


class Prompter:
    """
    Runs a nested input loop until the user submits or cancels.

    The main loop is suspended while a prompt is open; the prompt redraws
    the screen itself after every key.
    """

    def __init__(self, state: EditorState, keys: KeyDecoder, redraw: Callable[[], None]) -> None:
        self.state = state
        self.keys = keys
        self.redraw = redraw

    def ask(self, kind: PromptKind, prefix: str) -> str | None:
        """
        Read a line of text after prefix.

        Returns the text on Enter, or None if Escape was pressed. The editor
        is back in Normal mode when this returns.
        """
        state = self.state
        prompt = PromptState(kind=kind, prefix=prefix)
        state.prompt = prompt
        state.mode = Mode.PROMPT
        try:
            while True:
                state.message.set(prefix + prompt.text)
                self.redraw()
                event = self.keys.read_key()

                if event.key == Key.ENTER:
                    logger.debug("%s prompt submitted %r", prompt.kind.name, prompt.text)
                    return prompt.text
                if event.key == Key.ESCAPE:
                    logger.debug("%s prompt cancelled", prompt.kind.name)
                    return None
                _edit(prompt, event.key, event.char if event.is_char else None)
        finally:
            state.prompt = None
            state.mode = Mode.NORMAL
            state.message.clear()


def _edit(prompt: PromptState, key: Key | None, char: str | None) -> None:
    """Apply one editing key to the prompt text."""
    text, pos = prompt.text, prompt.pos
    if char is not None:
        prompt.text = text[:pos] + char + text[pos:]
        prompt.pos = pos + 1
    elif key == Key.TAB:
        prompt.text = text[:pos] + "\t" + text[pos:]
        prompt.pos = pos + 1
    elif key == Key.BACKSPACE and pos > 0:
        prompt.text = text[:pos - 1] + text[pos:]
        prompt.pos = pos - 1
    elif key == Key.DELETE and pos < len(text):
        prompt.text = text[:pos] + text[pos + 1:]
    elif key == Key.LEFT and pos > 0:
        prompt.pos = pos - 1
    elif key == Key.RIGHT and pos < len(text):
        prompt.pos = pos + 1
    elif key == Key.HOME:
        prompt.pos = 0
    elif key == Key.END:
        prompt.pos = len(text)
