"""One editable cell of the Sudoku grid."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .graphics import BLACK, WHITE, Color, Event, EventType, Key
from .widget import Widget, _half

if TYPE_CHECKING:
    from .app import App

GREY = Color(220, 220, 220)
RED = Color(255, 0, 0)
LOCKED = Color(210, 230, 255)
MIN_VALUE = 0
MAX_VALUE = 9


class NumberTile(Widget):
    """A cell holding 0 (empty) or a digit; typing changes it unless locked."""

    def __init__(
        self,
        app: App,
        x: int,
        y: int,
        sx: int,
        sy: int,
        row: int,
        col: int,
        value: int,
        on_change: Callable[[int, int], None],
    ) -> None:
        super().__init__(app, x, y, sx, sy)
        self.value = value
        self.min_value = MIN_VALUE
        self.max_value = MAX_VALUE
        self.row = row
        self.col = col
        self.locked = False
        self.valid = True
        self._on_change = on_change

    def draw(self) -> None:
        canvas = self.canvas
        if self.locked:
            canvas.set_color(LOCKED)
        elif self.selected:
            canvas.set_color(GREY)
        else:
            canvas.set_color(WHITE)
        canvas.move_to(self.x, self.y)
        canvas.box(self.sx, self.sy)

        if self.value != 0:
            num_h = canvas.ascent()
            num_w = canvas.text_width("1")
            canvas.set_color(BLACK if self.valid else RED)
            canvas.move_to(
                self.x + _half(self.sx - num_w), self.y + _half(self.sy - num_h)
            )
            canvas.text(str(self.value))

    def handle(self, event: Event) -> None:
        if self.locked:
            return
        if event.type != EventType.KEY or event.keycode <= 0:
            return
        if event.keycode == Key.BACKSPACE or event.keyutf8 == "0":
            self.clear()
            return
        if len(event.keyutf8) == 1 and "1" <= event.keyutf8 <= "9":
            self.enter_value(int(event.keyutf8))

    def action(self) -> None:
        """Report a change of value to the owner."""
        self._on_change(self.row, self.col)

    def _can_change_to(self, value: int) -> bool:
        return self.min_value <= self.value <= self.max_value and value != self.value

    def set_value(self, value: int) -> None:
        """Change the value without reporting it."""
        if self._can_change_to(value):
            self.value = value

    def enter_value(self, value: int) -> None:
        """Change the value as the player would, reporting the change."""
        if not self.locked and self._can_change_to(value):
            self.value = value
            self.action()

    def clear(self) -> None:
        """Empty the cell and report it."""
        self.value = 0
        self.action()