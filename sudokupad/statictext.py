"""A fixed label drawn on a coloured background."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .graphics import BLACK, WHITE, Color, Event
from .widget import Widget, _half

if TYPE_CHECKING:
    from .app import App


class StaticText(Widget):
    """Centred text in a filled box; it ignores input."""

    def __init__(
        self,
        app: App,
        x: int,
        y: int,
        sx: int,
        sy: int,
        text: str,
        bg_color: Color = WHITE,
        text_color: Color = BLACK,
    ) -> None:
        super().__init__(app, x, y, sx, sy)
        self.text = text
        self.bg_color = bg_color
        self.text_color = text_color

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_color(self.bg_color)
        canvas.move_to(self.x, self.y)
        canvas.box(self.sx, self.sy)
        canvas.set_color(self.text_color)
        text_height = canvas.ascent() + canvas.descent()
        canvas.move_to(
            self.x + _half(self.sx - canvas.text_width(self.text)),
            self.y + _half(self.sy - text_height),
        )
        canvas.text(self.text)

    def clear(self) -> None:
        """Paint the widget's area black."""
        canvas = self.canvas
        canvas.set_color(BLACK)
        canvas.move_to(self.x, self.y)
        canvas.box(self.sx, self.sy)

    def show(self) -> None:
        self.draw()

    def handle(self, event: Event) -> None:
        """Static text does not react to input."""