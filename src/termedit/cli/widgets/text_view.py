"""Text view widget - the document rows visible through the viewport."""

from __future__ import annotations

from termedit.cli.widgets.base import BaseWidget, Rect
from termedit.core.constants import CSI, DEFAULT_FG, FILLER, GUTTER_COLOR
from termedit.core.document import Document
from termedit.core.highlight import Highlight


class TextViewWidget(BaseWidget):
    """
    Draws a window of the document with a line-number gutter.

    Rows past the end of the document are drawn as a ``~`` filler. Each
    visible character is preceded by a colour escape whenever its highlight
    differs from the previous character's, and the line ends in the default
    foreground colour.
    """

    def __init__(self, document: Document) -> None:
        super().__init__()
        self.document = document
        self.row_offset = 0
        self.col_offset = 0

    def scroll_to(self, row_offset: int, col_offset: int) -> None:
        self.row_offset = row_offset
        self.col_offset = col_offset

    def render(self, bounds: Rect) -> list[str]:
        gutter = self.document.gutter_width
        text_width = max(0, bounds.width - gutter)
        lines: list[str] = []

        for y in range(bounds.height):
            file_row = y + self.row_offset
            if file_row >= self.document.num_rows:
                lines.append(FILLER)
                continue

            row = self.document[file_row]
            number = f"{file_row + 1:>{gutter - 1}} "
            parts = [f"{CSI}{GUTTER_COLOR}m{number}"]

            start = min(self.col_offset, row.rsize)
            end = min(self.col_offset + text_width, row.rsize)
            current: Highlight | None = None
            for ch, hl in zip(row.render[start:end], row.highlight[start:end]):
                if hl != current:
                    parts.append(f"{CSI}{int(hl)}m")
                    current = hl
                parts.append(ch)
            parts.append(DEFAULT_FG)
            lines.append("".join(parts))

        return lines
