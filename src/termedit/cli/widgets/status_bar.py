"""Status bar widget showing file name, line count and cursor position."""

from __future__ import annotations

from termedit.cli.widgets.base import BaseWidget, Rect
from termedit.core.constants import INVERT_OFF, INVERT_ON


class StatusBarWidget(BaseWidget):
    """Inverse-video bar with left-aligned and right-aligned text."""

    def __init__(self) -> None:
        super().__init__()
        self._left_text: str = ""
        self._right_text: str = ""

    def set_left(self, text: str) -> None:
        """Set left-aligned text."""
        self._left_text = text

    def set_right(self, text: str) -> None:
        """Set right-aligned text (e.g., cursor position)."""
        self._right_text = text

    def render(self, bounds: Rect) -> list[str]:
        """Render the status bar, fitting within bounds.width."""
        width = bounds.width
        left = self._left_text[:width]
        right = self._right_text

        # The right text is only shown when it fits after the left text
        padding = width - len(left)
        if len(right) <= padding:
            line = left + " " * (padding - len(right)) + right
        else:
            line = left + " " * padding

        return [f"{INVERT_ON}{line}{INVERT_OFF}"]
