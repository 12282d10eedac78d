"""Row - one line of the document plus its derived render form."""

from __future__ import annotations

from dataclasses import dataclass, field

from termedit.core.constants import TAB_STOP
from termedit.core.highlight import Highlight, RuleSet, classify


def expand_tabs(chars: str) -> str:
    """Expand every tab to TAB_STOP spaces."""
    return chars.replace("\t", " " * TAB_STOP)


@dataclass
class Row:
    """
    A single line of text with its render form and highlight tags.

    ``render`` and ``highlight`` are derived from ``chars`` and are
    recomputed by every method that changes ``chars``; assign through
    ``set_chars`` rather than mutating the field directly.
    """
    chars: str = ""
    render: str = field(default="", init=False)
    highlight: list[Highlight] = field(default_factory=list, init=False)
    rules: RuleSet | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.update()

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)

    def update(self) -> None:
        """Recompute the render form and highlight tags from chars."""
        self.render = expand_tabs(self.chars)
        self.highlight = classify(self.render, self.rules)

    def set_rules(self, rules: RuleSet | None) -> None:
        self.rules = rules
        self.update()

    def set_chars(self, chars: str) -> None:
        self.chars = chars
        self.update()

    def insert_char(self, col: int, ch: str) -> None:
        """Insert ch at col, clamping col into [0, size]."""
        col = max(0, min(col, self.size))
        self.set_chars(self.chars[:col] + ch + self.chars[col:])

    def delete_char(self, col: int) -> None:
        """Delete the character at col; out-of-range is a no-op."""
        if col < 0 or col >= self.size:
            return
        self.set_chars(self.chars[:col] + self.chars[col + 1:])

    def append(self, text: str) -> None:
        self.set_chars(self.chars + text)

    def truncate(self, col: int) -> str:
        """Cut the row at col and return the removed tail."""
        col = max(0, min(col, self.size))
        tail = self.chars[col:]
        self.set_chars(self.chars[:col])
        return tail
