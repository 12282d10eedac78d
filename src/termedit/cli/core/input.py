"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

ESC_BYTE = 0x1B
REPLACEMENT_CHAR = "\ufffd"


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character for everything else
    raw: bytes = b""  # Bytes consumed for this event

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None and self.char.isprintable()


class ByteSource(Protocol):
    """What the decoder needs from a terminal."""

    def read_byte(self) -> int: ...

    def poll_byte(self) -> int | None: ...


class KeyDecoder:
    """
    Turns the raw byte stream into one KeyEvent per call.

    Escape sequences are decoded with bounded lookahead: at most three bytes
    after ESC. A lone ESC (no follow-up within the terminal read timeout) is
    the Escape key. When ESC is followed by a byte that cannot start a
    sequence, that byte is kept and decoded on the next call, so typing Esc
    then ``:`` quickly still yields both keys.
    """

    SIMPLE_KEYS: dict[int, Key] = {
        ord("\r"): Key.ENTER,
        ord("\n"): Key.ENTER,
        ord("\t"): Key.TAB,
        0x7F: Key.BACKSPACE,
        0x08: Key.BACKSPACE,
    }

    # ESC [ <letter>
    CSI_LETTERS: dict[str, Key] = {
        "A": Key.UP,
        "B": Key.DOWN,
        "C": Key.RIGHT,
        "D": Key.LEFT,
        "H": Key.HOME,
        "F": Key.END,
    }

    # ESC [ <digit> ~
    CSI_TILDE: dict[str, Key] = {
        "1": Key.HOME,
        "7": Key.HOME,
        "3": Key.DELETE,
        "4": Key.END,
        "8": Key.END,
        "5": Key.PAGE_UP,
        "6": Key.PAGE_DOWN,
    }

    # ESC O <letter>
    SS3_LETTERS: dict[str, Key] = {
        "H": Key.HOME,
        "F": Key.END,
    }

    def __init__(self, source: ByteSource) -> None:
        self.source = source
        self._buffer: list[int] = []

    def _next_blocking(self) -> int:
        if self._buffer:
            return self._buffer.pop(0)
        return self.source.read_byte()

    def _next_pending(self) -> int | None:
        if self._buffer:
            return self._buffer.pop(0)
        return self.source.poll_byte()

    def _push_back(self, byte: int) -> None:
        self._buffer.insert(0, byte)

    def read_key(self) -> KeyEvent:
        """Block until a complete key is available and return it."""
        c = self._next_blocking()

        if c == ESC_BYTE:
            return self._read_escape()
        if c in self.SIMPLE_KEYS:
            return KeyEvent(key=self.SIMPLE_KEYS[c], raw=bytes([c]))
        if c < 0x80:
            return KeyEvent(char=chr(c), raw=bytes([c]))
        return self._read_utf8(c)

    def _read_escape(self) -> KeyEvent:
        """Decode what follows an ESC byte."""
        escape = KeyEvent(key=Key.ESCAPE, raw=b"\x1b")

        seq0 = self._next_pending()
        if seq0 is None:
            return escape
        if seq0 not in (ord("["), ord("O")):
            self._push_back(seq0)
            return escape

        seq1 = self._next_pending()
        if seq1 is None:
            return escape
        raw = bytes([ESC_BYTE, seq0, seq1])
        ch = chr(seq1)

        if seq0 == ord("O"):
            key = self.SS3_LETTERS.get(ch)
            return KeyEvent(key=key, raw=raw) if key else KeyEvent(key=Key.ESCAPE, raw=raw)

        if ch in self.CSI_LETTERS:
            return KeyEvent(key=self.CSI_LETTERS[ch], raw=raw)
        if "1" <= ch <= "9":
            seq2 = self._next_pending()
            if seq2 is None:
                return KeyEvent(key=Key.ESCAPE, raw=raw)
            raw += bytes([seq2])
            key = self.CSI_TILDE.get(ch)
            if seq2 == ord("~") and key is not None:
                return KeyEvent(key=key, raw=raw)
        return KeyEvent(key=Key.ESCAPE, raw=raw)

    def _read_utf8(self, lead: int) -> KeyEvent:
        """Collect the continuation bytes of a multi-byte UTF-8 character."""
        if 0xC2 <= lead <= 0xDF:
            needed = 1
        elif 0xE0 <= lead <= 0xEF:
            needed = 2
        elif 0xF0 <= lead <= 0xF4:
            needed = 3
        else:
            return KeyEvent(char=REPLACEMENT_CHAR, raw=bytes([lead]))

        data = bytearray([lead])
        for _ in range(needed):
            b = self._next_pending()
            if b is None:
                break
            if b & 0xC0 != 0x80:
                self._push_back(b)
                break
            data.append(b)

        try:
            ch = data.decode("utf-8")
        except UnicodeDecodeError:
            ch = REPLACEMENT_CHAR
        return KeyEvent(char=ch, raw=bytes(data))
