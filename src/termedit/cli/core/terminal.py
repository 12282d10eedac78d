"""Low-level terminal operations - raw mode, geometry, byte I/O."""

from __future__ import annotations

import fcntl
import logging
import os
import struct
import sys
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from termedit.core.constants import CSI, CURSOR_HOME, RESET, SHOW_CURSOR
from termedit.errors import TerminalError

logger = logging.getLogger(__name__)

ALT_SCREEN_ON = f"{CSI}?1049h"
ALT_SCREEN_OFF = f"{CSI}?1049l"
CLEAR_SCREEN = f"{CSI}2J"


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """
    Owns the controlling terminal for the lifetime of the editor.

    Reads are byte-at-a-time from ``fd_in``; every frame goes out in a single
    ``os.write`` on ``fd_out`` so the screen never shows a half-drawn state.
    """

    def __init__(self, fd_in: int | None = None, fd_out: int | None = None) -> None:
        self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        self._orig_attrs: list | None = None

    # -------------------------------------------------------------------------
    # Mode control
    # -------------------------------------------------------------------------

    def enter_raw_mode(self) -> None:
        """Switch input to raw mode, remembering the attributes to restore."""
        if not os.isatty(self.fd_in):
            raise TerminalError("standard input is not a terminal")
        try:
            orig = termios.tcgetattr(self.fd_in)
            raw = termios.tcgetattr(self.fd_in)
            raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
            raw[1] &= ~termios.OPOST
            raw[2] |= termios.CS8
            raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
            # read() returns after at most 100ms with or without input
            raw[6][termios.VMIN] = 0
            raw[6][termios.VTIME] = 1
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        except termios.error as e:
            raise TerminalError(f"cannot enter raw mode: {e}") from e
        self._orig_attrs = orig
        logger.debug("Entered raw mode on fd %d", self.fd_in)

    def restore_mode(self) -> None:
        """Put back the attributes captured by enter_raw_mode. Safe to repeat."""
        if self._orig_attrs is None:
            return
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, self._orig_attrs)
        except termios.error as e:
            logger.error("Failed to restore terminal mode: %s", e)
        self._orig_attrs = None
        logger.debug("Restored terminal mode on fd %d", self.fd_in)

    @contextmanager
    def raw_mode(self) -> Iterator[Terminal]:
        """Context manager for raw terminal mode."""
        self.enter_raw_mode()
        try:
            yield self
        finally:
            self.restore_mode()

    @contextmanager
    def alternate_screen(self) -> Iterator[Terminal]:
        """Use alternate screen buffer (preserves scrollback)."""
        self._write_quietly(ALT_SCREEN_ON)
        try:
            yield self
        finally:
            self._write_quietly(ALT_SCREEN_OFF)

    @contextmanager
    def managed_mode(self) -> Iterator[Terminal]:
        """Full TUI mode: raw input on an alternate screen."""
        with self.raw_mode():
            with self.alternate_screen():
                try:
                    yield self
                finally:
                    self._write_quietly(CLEAR_SCREEN + CURSOR_HOME + SHOW_CURSOR + RESET)

    def _write_quietly(self, text: str) -> None:
        """Best-effort write used while tearing down."""
        try:
            os.write(self.fd_out, text.encode())
        except OSError as e:
            logger.warning("Terminal write failed during cleanup: %s", e)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def query_geometry(self) -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            packed = fcntl.ioctl(self.fd_out, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0))
        except OSError as e:
            raise TerminalError(f"cannot query window size: {e}") from e
        rows, cols, _, _ = struct.unpack("HHHH", packed)
        if rows == 0 or cols == 0:
            raise TerminalError("terminal reported a zero window size")
        return TerminalSize(rows, cols)

    # -------------------------------------------------------------------------
    # Byte I/O
    # -------------------------------------------------------------------------

    def poll_byte(self) -> int | None:
        """Read one byte, or None if nothing arrives within the read timeout."""
        try:
            data = os.read(self.fd_in, 1)
        except InterruptedError:
            return None
        except OSError as e:
            raise TerminalError(f"read failed: {e}") from e
        if not data:
            return None
        return data[0]

    def read_byte(self) -> int:
        """Block until one byte of input is available."""
        while True:
            c = self.poll_byte()
            if c is not None:
                return c

    def write_frame(self, data: bytes) -> None:
        """Write a complete frame with one system call."""
        try:
            written = os.write(self.fd_out, data)
        except OSError as e:
            raise TerminalError(f"write failed: {e}") from e
        if written != len(data):
            raise TerminalError(f"short write: {written} of {len(data)} bytes")
