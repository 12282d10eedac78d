"""Document - the ordered sequence of rows being edited."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from termedit.core.highlight import RuleSet
from termedit.core.row import Row


@dataclass
class Document:
    """
    Line-oriented text buffer.

    Rows are addressed by index only. Rows are kept in a flat list, so
    inserting or deleting is linear in the number of rows; that is fine
    for interactively edited files of tens of thousands of lines.

    Every mutation marks the document dirty. Loading and saving clear
    the flag (see ``termedit.io``).

    Example:
        doc = Document.from_lines(["hello", "world"])
        doc.split_row(0, 2)          # "he" / "llo" / "world"
        doc.serialize()              # "he\\nllo\\nworld\\n"
    """
    rows: list[Row] = field(default_factory=list)
    filename: Path | None = None
    rules: RuleSet | None = None
    dirty: bool = False

    @classmethod
    def from_lines(cls, lines: list[str], filename: Path | None = None) -> Document:
        """Build a clean document with one row per line."""
        doc = cls(filename=filename)
        for line in lines:
            doc.insert_row(doc.num_rows, line)
        doc.dirty = False
        return doc

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def gutter_width(self) -> int:
        """Columns used by line numbers: digits of num_rows plus one margin."""
        if not self.rows:
            return 0
        return len(str(self.num_rows)) + 1

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def set_rules(self, rules: RuleSet | None) -> None:
        """Switch syntax rules and re-highlight every row."""
        self.rules = rules
        for row in self.rows:
            row.set_rules(rules)

    # -------------------------------------------------------------------------
    # Row operations
    # -------------------------------------------------------------------------

    def insert_row(self, pos: int, text: str) -> None:
        """Insert a row at pos in [0, num_rows]; other positions are ignored."""
        if pos < 0 or pos > self.num_rows:
            return
        self.rows.insert(pos, Row(text, rules=self.rules))
        self.dirty = True

    def delete_row(self, pos: int) -> None:
        """Remove the row at pos in [0, num_rows); other positions are ignored."""
        if pos < 0 or pos >= self.num_rows:
            return
        del self.rows[pos]
        self.dirty = True

    def insert_char(self, row: int, col: int, ch: str) -> None:
        """Insert ch into a row; row == num_rows appends a new row first."""
        if row == self.num_rows:
            self.insert_row(self.num_rows, "")
        if row < 0 or row >= self.num_rows:
            return
        self.rows[row].insert_char(col, ch)
        self.dirty = True

    def delete_char(self, row: int, col: int) -> tuple[int, int]:
        """
        Delete the character before (col, row).

        At column 0 of a non-first row the row is joined onto the previous
        one. Returns the cursor position (x, y) after the deletion.
        """
        if row < 0 or row >= self.num_rows or (row == 0 and col <= 0):
            return col, row

        if col > 0:
            target = self.rows[row]
            col = min(col, target.size)
            target.delete_char(col - 1)
            self.dirty = True
            return col - 1, row

        join_at = self.rows[row - 1].size
        self.append_to_row(row - 1, self.rows[row].chars)
        self.delete_row(row)
        return join_at, row - 1

    def split_row(self, row: int, col: int) -> None:
        """Break a row at col, moving the remainder to a new row below."""
        if row == self.num_rows:
            self.insert_row(row, "")
            return
        if row < 0 or row > self.num_rows:
            return
        tail = self.rows[row].truncate(col)
        self.insert_row(row + 1, tail)

    def truncate_row(self, row: int, col: int) -> None:
        """Delete from col to the end of the row."""
        if 0 <= row < self.num_rows and col < self.rows[row].size:
            self.rows[row].truncate(col)
            self.dirty = True

    def append_to_row(self, row: int, text: str) -> None:
        """Add text to the end of a row; used to join rows."""
        if 0 <= row < self.num_rows:
            self.rows[row].append(text)
            self.dirty = True

    def replace_char(self, row: int, col: int, ch: str) -> None:
        """Substitute the character at col; positions past the text are ignored."""
        if not (0 <= row < self.num_rows) or not (0 <= col < self.rows[row].size):
            return
        target = self.rows[row]
        target.set_chars(target.chars[:col] + ch + target.chars[col + 1:])
        self.dirty = True

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def lines(self) -> list[str]:
        return [row.chars for row in self.rows]

    def serialize(self) -> str:
        """All rows, each followed by a newline."""
        return "".join(f"{line}\n" for line in self.lines())
