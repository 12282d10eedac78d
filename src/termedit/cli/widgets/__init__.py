"""Reusable TUI widgets."""

from termedit.cli.widgets.base import BaseWidget, Rect
from termedit.cli.widgets.message_bar import MessageBarWidget
from termedit.cli.widgets.status_bar import StatusBarWidget
from termedit.cli.widgets.text_view import TextViewWidget

__all__ = [
    "BaseWidget",
    "Rect",
    "MessageBarWidget",
    "StatusBarWidget",
    "TextViewWidget",
]
