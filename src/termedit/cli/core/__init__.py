"""Core TUI infrastructure - terminal I/O and key decoding."""

from termedit.cli.core.terminal import Terminal, TerminalSize
from termedit.cli.core.input import ByteSource, Key, KeyDecoder, KeyEvent

__all__ = [
    "Terminal",
    "TerminalSize",
    "ByteSource",
    "Key",
    "KeyDecoder",
    "KeyEvent",
]
