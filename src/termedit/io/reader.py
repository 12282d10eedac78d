"""Load text files into documents."""

from __future__ import annotations

import logging
from pathlib import Path

from termedit.config import load_rules
from termedit.core.document import Document

logger = logging.getLogger(__name__)


def split_lines(data: bytes) -> list[str]:
    """
    Decode file contents into lines.

    Bytes that are not valid UTF-8 survive a load/save round trip through
    surrogate escapes. One trailing ``\\r`` is dropped from each line, and
    a final newline does not produce an extra empty line.
    """
    text = data.decode("utf-8", errors="surrogateescape")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_bytes(data: bytes, filename: Path | None = None) -> Document:
    """Build a clean document from raw bytes."""
    return Document.from_lines(split_lines(data), filename=filename)


def load(path: str | Path, syntax_dir: Path | None = None) -> Document:
    """
    Load a text file from disk.

    A file that does not exist yet gives an empty document that keeps the
    name, so the first save creates it. Other read errors propagate as
    OSError. Syntax rules are chosen from the file extension.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        logger.info("New file %s", path)
        data = b""

    doc = load_bytes(data, filename=path)
    doc.set_rules(load_rules(path.suffix, syntax_dir))
    doc.dirty = False
    logger.info("Loaded %s (%d lines)", path, doc.num_rows)
    return doc
