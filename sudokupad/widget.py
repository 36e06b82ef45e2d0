"""Base class of everything drawn in an application window."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import App
    from .graphics import Canvas, Event


def _half(value: int) -> int:
    """Half of value, rounded towards zero."""
    return int(value / 2)


class Widget(ABC):
    """A rectangular element that registers itself with its app."""

    def __init__(self, app: App, x: int, y: int, sx: int, sy: int) -> None:
        self.app = app
        self.x = x
        self.y = y
        self.sx = sx
        self.sy = sy
        self.selected = False
        app.add_widget(self)

    @property
    def canvas(self) -> Canvas:
        return self.app.canvas

    def is_selected(self, mx: int, my: int) -> bool:
        """Whether (mx, my) lies strictly inside the widget."""
        return self.x < mx < self.x + self.sx and self.y < my < self.y + self.sy

    @abstractmethod
    def draw(self) -> None:
        """Paint the widget on the app's canvas."""

    @abstractmethod
    def handle(self, event: Event) -> None:
        """React to an input event while the widget has focus."""

    def value_string(self) -> str:
        return ""