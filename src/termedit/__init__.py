"""
termedit: a modal text editor for the terminal

vi-style Normal and Insert modes, search, ex commands, and an editing
engine that can be used without the terminal front end.

Quick Start:
    >>> import termedit
    >>> doc = termedit.load("notes.txt")
    >>> doc.insert_row(0, "# notes")
    >>> termedit.save(doc)

Features:
    - Raw-mode terminal control with guaranteed restore
    - Escape-sequence key decoding (arrows, Home/End, PageUp/Down, Delete)
    - Tab-aware rendering with line numbers and syntax highlighting
    - Incremental search with wraparound
    - JSON syntax rule files under ~/.config/termedit/syntax
"""

__version__ = "0.1.0"

from termedit.core import Document, Highlight, Row, RuleSet, classify
from termedit.errors import RuleFileError, TerminalError, TermeditError
from termedit.io import load, save

__all__ = [
    "__version__",
    "Document",
    "Highlight",
    "Row",
    "RuleSet",
    "classify",
    "RuleFileError",
    "TerminalError",
    "TermeditError",
    "load",
    "save",
]
