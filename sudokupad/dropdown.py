"""A drop-down list that shows a few options at a time and scrolls."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from .graphics import BLACK, WHITE, Color, Event, EventType, MouseButton
from .widget import Widget

if TYPE_CHECKING:
    from .app import App

GREY = Color(200, 200, 200)
PADDING = 3
ARROW_WIDTH = 20
NO_OPTIONS = "Error: No Options Given"


class Dropdown(Widget):
    """Shows the chosen option; opens into a scrollable list on the arrow."""

    def __init__(
        self,
        app: App,
        x: int,
        y: int,
        show_count: int,
        options: Iterable[str],
    ) -> None:
        super().__init__(app, x, y, 0, 0)
        self.options = list(options)
        if not self.options:
            self.options.append(NO_OPTIONS)
            show_count = 1
        self.show_count = max(1, show_count)
        self.selected_index = 0
        self.visible_indexes = self.visible_option_indexes()
        self.start_option = 0
        self.hover_index = -1
        self.opened = False

        canvas = self.canvas
        line_height = canvas.ascent() + canvas.descent() + PADDING
        widest = max([0, *(canvas.text_width(option) for option in self.options)])
        self.arrow_w = ARROW_WIDTH
        self.arrow_h = line_height
        self.sx = widest + ARROW_WIDTH + 2 * PADDING
        self.arrow_x = x + self.sx - ARROW_WIDTH
        self.sy = line_height
        self.text_h = line_height

    @property
    def selected(self) -> Callable[[], str]:
        """Callable returning the chosen option; assigning sets the focus flag."""
        return self._selected_option

    @selected.setter
    def selected(self, value: bool) -> None:
        self.has_focus = value

    def _selected_option(self) -> str:
        return self.options[self.selected_index]

    def draw(self) -> None:
        canvas = self.canvas
        canvas.set_color(WHITE)
        canvas.move_to(self.x, self.y)
        canvas.box(self.sx, self.sy)

        text_y = self.y + PADDING
        if self.opened:
            visible = self.visible_indexes
            safe_start = min(self.start_option, max(0, len(visible) - self.show_count))
            if (
                0 <= self.hover_index < self.show_count
                and safe_start + self.hover_index < len(visible)
            ):
                canvas.set_color(GREY)
                canvas.move_to(
                    self.x, text_y - PADDING + self.hover_index * self.text_h
                )
                canvas.box(self.sx, self.text_h)
            for index in visible[safe_start:safe_start + self.show_count]:
                canvas.set_color(BLACK)
                canvas.move_to(self.x + PADDING, text_y)
                canvas.text(self.options[index])
                text_y += self.text_h
        else:
            canvas.set_color(BLACK)
            canvas.move_to(self.x + PADDING, text_y)
            canvas.text(self.options[self.selected_index])

        canvas.set_color(GREY)
        canvas.move_to(self.arrow_x, self.y)
        canvas.box(self.arrow_w, self.arrow_h)

        center_x = self.x + self.sx - self.arrow_w // 2
        top = self.y + self.arrow_h // 4
        bottom = self.y + 3 * self.arrow_h // 4
        wing = self.arrow_w // 3
        canvas.set_color(BLACK)
        canvas.move_to(center_x, bottom)
        canvas.line_to(center_x - wing, top)
        canvas.line_to(center_x + wing, top)
        canvas.line_to(center_x, bottom)

    def clear_draw(self) -> None:
        """Paint the widget's current area black."""
        canvas = self.canvas
        canvas.set_color(BLACK)
        canvas.move_to(self.x, self.y)
        canvas.box(self.sx, self.sy)

    def open_menu(self) -> None:
        self.opened = True
        self.visible_indexes = self.visible_option_indexes()
        self.start_option = 0
        self.sy = self.text_h * min(self.show_count, len(self.options))

    def close_menu(self) -> None:
        self.opened = False
        self.clear_draw()
        self.sy //= self.show_count

    def arrow_pressed(self, mx: int, my: int) -> None:
        """Toggle the list when (mx, my) is on the arrow."""
        if (
            self.arrow_x <= mx <= self.x + self.sx
            and self.y <= my <= self.y + self.arrow_h
        ):
            if self.opened:
                self.close_menu()
            else:
                self.open_menu()

    def clicked_inside(self, mx: int, my: int) -> bool:
        """Whether (mx, my) lies inside the widget, borders included."""
        return self.x <= mx <= self.x + self.sx and self.y <= my <= self.y + self.sy

    def visible_option_indexes(self) -> list[int]:
        """Option indexes with the chosen one first, the rest in cyclic order."""
        count = len(self.options)
        if count == 0:
            return []
        start = self.selected_index
        return [start] + [
            (start + step) % count
            for step in range(1, count)
            if (start + step) % count != start
        ]

    def select_option(self, mx: int, my: int) -> None:
        """Choose the listed option under (mx, my) and close the list."""
        if not self.clicked_inside(mx, my):
            return
        clicked_pos = (my - self.y) // self.text_h
        if clicked_pos >= 0 and self.start_option + clicked_pos < len(
            self.visible_indexes
        ):
            self.selected_index = self.visible_indexes[self.start_option + clicked_pos]
            self.visible_indexes = self.visible_option_indexes()
            self.start_option = 0
            self.hover_index = -1
        self.close_menu()

    def hover_option(self, mx: int, my: int) -> None:
        if self.clicked_inside(mx, my):
            self.hover_index = (my - self.y) // self.text_h

    def handle(self, event: Event) -> None:
        if event.type != EventType.MOUSE:
            return
        if event.button == MouseButton.LEFT:
            if self.clicked_inside(event.pos_x, event.pos_y):
                if self.opened:
                    self.select_option(event.pos_x, event.pos_y)
                else:
                    self.arrow_pressed(event.pos_x, event.pos_y)
            else:
                self.close_menu()

        if self.opened:
            if event.button == MouseButton.WHEEL_DOWN:
                if self.start_option + self.show_count < len(self.visible_indexes):
                    self.start_option += 1
            elif event.button == MouseButton.WHEEL_UP:
                if self.start_option > 0:
                    self.start_option -= 1

        self.hover_option(event.pos_x, event.pos_y)

    def value_string(self) -> str:
        return self.options[self.selected_index]

    def update(self, new_options: Iterable[str]) -> None:
        """Replace the options; an empty list leaves nothing selected."""
        options = list(new_options)
        if options:
            self.options = options
        else:
            self.options = []
            self.selected_index = -1