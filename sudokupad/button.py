"""A push button that runs a callback when clicked."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .graphics import BLACK, WHITE, Color, Event, EventType, MouseButton
from .widget import Widget, _half

if TYPE_CHECKING:
    from .app import App

FACE = Color(128, 128, 128)


class PushButton(Widget):
    """A labelled button; a left press fires the callback."""

    def __init__(
        self,
        app: App,
        x: int,
        y: int,
        sx: int,
        sy: int,
        label: str,
        callback: Callable[[], None],
    ) -> None:
        super().__init__(app, x, y, sx, sy)
        self.label = label
        self.pushed = False
        self._callback = callback

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_color(FACE)
        canvas.move_to(self.x, self.y)
        canvas.box(self.sx, self.sy)
        canvas.set_color(WHITE if self.pushed else BLACK)
        text_height = canvas.ascent() + canvas.descent()
        canvas.move_to(
            self.x + _half(self.sx - canvas.text_width(self.label)),
            self.y + _half(self.sy - text_height),
        )
        canvas.text(self.label)

    def handle(self, event: Event) -> None:
        if event.type != EventType.MOUSE:
            return
        if event.button == MouseButton.LEFT:
            self.action()
            self.push()
        elif event.button == -MouseButton.LEFT:
            self.unpush()

    def push(self) -> None:
        self.pushed = True

    def unpush(self) -> None:
        self.pushed = False

    def action(self) -> None:
        self._callback()