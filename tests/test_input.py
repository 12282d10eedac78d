"""Tests for the key decoder."""

import pytest

from termedit.cli.core.input import Key, KeyDecoder, KeyEvent

from conftest import ScriptedTerminal


def decode_all(script: bytes) -> list[KeyEvent]:
    terminal = ScriptedTerminal(script)
    decoder = KeyDecoder(terminal)
    events = []
    while terminal.pending or decoder._buffer:
        events.append(decoder.read_key())
    return events


class TestSimpleKeys:
    """Single-byte input."""

    def test_printable(self) -> None:
        events = decode_all(b"aZ:")
        assert [e.char for e in events] == ["a", "Z", ":"]
        assert all(e.is_char for e in events)

    @pytest.mark.parametrize("byte,key", [
        (b"\r", Key.ENTER),
        (b"\n", Key.ENTER),
        (b"\t", Key.TAB),
        (b"\x7f", Key.BACKSPACE),
        (b"\x08", Key.BACKSPACE),
    ])
    def test_named(self, byte: bytes, key: Key) -> None:
        assert decode_all(byte)[0].key == key

    def test_control_character(self) -> None:
        event = decode_all(b"\x11")[0]
        assert event.key is None
        assert not event.is_char
        assert event.char == "\x11"

    def test_utf8(self) -> None:
        events = decode_all("é€".encode("utf-8"))
        assert [e.char for e in events] == ["é", "€"]

    def test_invalid_utf8_gives_replacement(self) -> None:
        events = decode_all(b"\xff")
        assert events[0].char == "\ufffd"

    def test_truncated_utf8_keeps_following_byte(self) -> None:
        events = decode_all(b"\xc3a")
        assert events[0].char == "\ufffd"
        assert events[1].char == "a"


class TestEscapeSequences:
    """Multi-byte sequences starting with ESC."""

    @pytest.mark.parametrize("seq,key", [
        (b"\x1b[A", Key.UP),
        (b"\x1b[B", Key.DOWN),
        (b"\x1b[C", Key.RIGHT),
        (b"\x1b[D", Key.LEFT),
        (b"\x1b[H", Key.HOME),
        (b"\x1b[F", Key.END),
        (b"\x1b[1~", Key.HOME),
        (b"\x1b[7~", Key.HOME),
        (b"\x1b[3~", Key.DELETE),
        (b"\x1b[4~", Key.END),
        (b"\x1b[8~", Key.END),
        (b"\x1b[5~", Key.PAGE_UP),
        (b"\x1b[6~", Key.PAGE_DOWN),
        (b"\x1bOH", Key.HOME),
        (b"\x1bOF", Key.END),
    ])
    def test_sequences(self, seq: bytes, key: Key) -> None:
        events = decode_all(seq)
        assert len(events) == 1
        assert events[0].key == key
        assert events[0].raw == seq

    def test_lone_escape(self) -> None:
        events = decode_all(b"\x1b")
        assert [e.key for e in events] == [Key.ESCAPE]

    def test_escape_then_key_keeps_the_key(self) -> None:
        events = decode_all(b"\x1b:")
        assert events[0].key == Key.ESCAPE
        assert events[1].char == ":"

    def test_unknown_tilde_sequence_is_escape(self) -> None:
        events = decode_all(b"\x1b[2~")
        assert [e.key for e in events] == [Key.ESCAPE]

    def test_wrong_terminator_is_escape(self) -> None:
        events = decode_all(b"\x1b[3x")
        assert [e.key for e in events] == [Key.ESCAPE]

    def test_unknown_ss3_is_escape(self) -> None:
        events = decode_all(b"\x1bOP")
        assert [e.key for e in events] == [Key.ESCAPE]

    def test_incomplete_sequence_is_escape(self) -> None:
        events = decode_all(b"\x1b[")
        assert [e.key for e in events] == [Key.ESCAPE]

    def test_mixed_stream(self) -> None:
        events = decode_all(b"i\x1b[Ax\r")
        assert events[0].char == "i"
        assert events[1].key == Key.UP
        assert events[2].char == "x"
        assert events[3].key == Key.ENTER
