"""Message bar widget for notices and the prompt line."""

from __future__ import annotations

from termedit.cli.widgets.base import BaseWidget, Rect
from termedit.core.constants import CSI, DEFAULT_COLORS


class MessageBarWidget(BaseWidget):
    """One line of text drawn in a foreground/background colour pair."""

    def __init__(self) -> None:
        super().__init__()
        self._text = ""
        self._fg = 37
        self._bg = 49

    def set_message(self, text: str, fg: int, bg: int) -> None:
        self._text = text
        self._fg = fg
        self._bg = bg

    def render(self, bounds: Rect) -> list[str]:
        text = self._text[:bounds.width]
        return [f"{CSI}{self._fg};{self._bg}m{text}{DEFAULT_COLORS}"]
