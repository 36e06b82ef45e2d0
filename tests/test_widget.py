import pytest

from sudokupad.widget import Widget


class RecordingApp:
    def __init__(self):
        self.widgets = []
        self.canvas = object()

    def add_widget(self, widget):
        self.widgets.append(widget)


class Square(Widget):
    def draw(self):
        pass

    def handle(self, event):
        pass


def test_widget_registers_with_app():
    app = RecordingApp()
    w = Square(app, 0, 0, 10, 10)
    assert app.widgets == [w]
    assert w.canvas is app.canvas
    assert Widget.is_selected(w, 5, 5) is True


def test_inside_point_is_selected():
    w = Square(RecordingApp(), 10, 20, 30, 40)
    assert Widget.is_selected(w, 15, 25) is True


@pytest.mark.parametrize("point", [(10, 25), (40, 25), (15, 20), (15, 60), (0, 0)])
def test_border_and_outside_not_selected(point):
    w = Square(RecordingApp(), 10, 20, 30, 40)
    assert Widget.is_selected(w, *point) is False


def test_new_widget_is_not_selected():
    w = Square(RecordingApp(), 0, 0, 5, 5)
    assert w.selected is False
    assert Widget.is_selected(w, 2, 2) is True
    assert w.selected is False


def test_default_value_string_is_empty():
    w = Square(RecordingApp(), 0, 0, 5, 5)
    assert Widget.value_string(w) == ""


def test_widget_is_abstract():
    with pytest.raises(TypeError):
        Widget(RecordingApp(), 0, 0, 1, 1)