"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


class BaseWidget(ABC):
    """Base class for the screen regions that make up a frame."""

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Render widget content as list of lines, one per row of bounds."""
        pass
