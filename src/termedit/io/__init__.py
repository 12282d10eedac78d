"""File I/O for edited documents."""

from termedit.io.reader import load, load_bytes
from termedit.io.writer import save

__all__ = ["load", "load_bytes", "save"]
