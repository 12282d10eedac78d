"""Save documents to disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from termedit.core.document import Document

logger = logging.getLogger(__name__)


def save(doc: Document, path: str | Path | None = None) -> int:
    """
    Write a document to disk and return the number of bytes written.

    The file is opened in place and truncated to the new length rather
    than replaced, so its permissions and links are kept. Errors propagate
    as OSError and leave the document dirty.
    """
    path = Path(path) if path is not None else doc.filename
    if path is None:
        raise ValueError("document has no file name")

    data = doc.serialize().encode("utf-8", errors="surrogateescape")
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        os.ftruncate(fd, len(data))
        written = os.pwrite(fd, data, 0)
    finally:
        os.close(fd)
    if written != len(data):
        raise OSError(f"short write: {written} of {len(data)} bytes")

    doc.dirty = False
    logger.info("Wrote %d bytes to %s", written, path)
    return written
