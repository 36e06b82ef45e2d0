"""Window application that routes events to its widgets."""

from __future__ import annotations

from .graphics import Canvas, Event, EventType, MouseButton
from .widget import Widget

DEFAULT_FONT = "LiberationSans-Regular.ttf"
DEFAULT_FONT_SIZE = 20


class App:
    """Owns the canvas, the widgets and the focused widget."""

    def __init__(self, width: int, height: int, canvas: Canvas | None = None) -> None:
        self.width = width
        self.height = height
        self.canvas = (
            canvas
            if canvas is not None
            else Canvas(width, height, DEFAULT_FONT, DEFAULT_FONT_SIZE)
        )
        self.widgets: list[Widget] = []
        self.focus: Widget | None = None

    def add_widget(self, widget: Widget) -> None:
        self.widgets.append(widget)

    def remove_widget(self, widget: Widget) -> None:
        """Drop every occurrence of widget; it loses focus if it had it."""
        self.widgets = [w for w in self.widgets if w is not widget]
        if self.focus is widget:
            self.focus = None

    def select_widget(self, mx: int, my: int) -> Widget | None:
        """The first widget containing (mx, my), if any."""
        return next((w for w in self.widgets if w.is_selected(mx, my)), None)

    def process_event(self, event: Event) -> None:
        """Move focus on a left click, redraw and let the focus handle event."""
        if event.type == EventType.MOUSE and event.button == MouseButton.LEFT:
            if self.focus is not None:
                self.focus.selected = False
            self.focus = self.select_widget(event.pos_x, event.pos_y)
            if self.focus is not None:
                self.focus.selected = True

        for widget in list(self.widgets):
            if widget is not self.focus:
                widget.draw()

        if self.focus is not None:
            self.focus.handle(event)
            self.focus.draw()

        self.canvas.refresh()

    def event_loop(self) -> None:
        """Process events until the canvas stops producing them."""
        for event in self.canvas.events():
            self.process_event(event)