"""Tests for loading and saving files."""

import os
import stat
from pathlib import Path

import pytest

from termedit.core.document import Document
from termedit.core.highlight import Highlight
from termedit.io import load, load_bytes, save
from termedit.io.reader import split_lines


class TestSplitLines:
    """Decoding file bytes into lines."""

    def test_final_newline_is_not_a_line(self) -> None:
        assert split_lines(b"a\nb\n") == ["a", "b"]

    def test_no_final_newline(self) -> None:
        assert split_lines(b"a\nb") == ["a", "b"]

    def test_crlf(self) -> None:
        assert split_lines(b"a\r\nb\r\n") == ["a", "b"]

    def test_blank_lines_kept(self) -> None:
        assert split_lines(b"\n\nx\n") == ["", "", "x"]

    def test_empty(self) -> None:
        assert split_lines(b"") == []

    def test_invalid_utf8_survives(self) -> None:
        lines = split_lines(b"caf\xe9\n")
        doc = Document.from_lines(lines)
        assert doc.serialize().encode("utf-8", errors="surrogateescape") == b"caf\xe9\n"


class TestLoad:
    """Loading from disk."""

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "three.txt"
        path.write_bytes(b"one\ntwo\nthree\n")
        doc = load(path)
        assert doc.lines() == ["one", "two", "three"]
        assert doc.filename == path
        assert doc.dirty is False

    def test_missing_file_is_new_document(self, tmp_path: Path) -> None:
        path = tmp_path / "new.txt"
        doc = load(path)
        assert doc.num_rows == 0
        assert doc.filename == path
        assert not path.exists()

    def test_unreadable_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load(tmp_path)

    def test_rules_selected_by_extension(self, tmp_path: Path) -> None:
        syntax = tmp_path / "syntax"
        syntax.mkdir()
        (syntax / "go.json").write_text('{"statements": ["func"]}')
        path = tmp_path / "main.go"
        path.write_text("func main\n")
        doc = load(path, syntax_dir=syntax)
        assert doc.rules is not None
        assert doc[0].highlight[:4] == [Highlight.STATEMENT] * 4
        assert doc.dirty is False

    def test_load_bytes(self) -> None:
        doc = load_bytes(b"x\ny\n")
        assert doc.lines() == ["x", "y"]
        assert doc.filename is None


class TestSave:
    """Saving to disk."""

    def test_save_returns_bytes_written(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        doc = Document.from_lines(["hello", "world"], filename=path)
        doc.insert_char(0, 0, "!")
        assert save(doc) == len(b"!hello\nworld\n")
        assert path.read_bytes() == b"!hello\nworld\n"
        assert doc.dirty is False

    def test_save_truncates_longer_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        path.write_text("a much longer previous content\n" * 10)
        save(Document.from_lines(["short"]), path)
        assert path.read_text() == "short\n"

    def test_new_file_mode(self, tmp_path: Path) -> None:
        path = tmp_path / "new.txt"
        old_umask = os.umask(0o022)
        try:
            save(Document.from_lines(["x"]), path)
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_save_without_name_raises(self) -> None:
        with pytest.raises(ValueError):
            save(Document.from_lines(["x"]))

    def test_failed_save_keeps_dirty(self, tmp_path: Path) -> None:
        doc = Document.from_lines(["x"], filename=tmp_path / "no" / "such" / "dir.txt")
        doc.insert_char(0, 0, "y")
        with pytest.raises(OSError):
            save(doc)
        assert doc.dirty is True

    def test_round_trip_preserves_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "rt.txt"
        path.write_bytes(b"a\n\tb\n\nc\n")
        doc = load(path)
        save(doc)
        assert path.read_bytes() == b"a\n\tb\n\nc\n"
