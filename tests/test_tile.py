from sudokupad.app import App
from sudokupad.graphics import BLACK, WHITE, Event, EventType, Key
from sudokupad.tile import GREY, LOCKED, RED, NumberTile


class FakeCanvas:
    def __init__(self):
        self.colors = []
        self.texts = []
        self.boxes = []
        self.color = None
        self.x = 0
        self.y = 0

    def set_color(self, color):
        self.color = color
        self.colors.append(color)

    def move_to(self, x, y):
        self.x, self.y = x, y

    def box(self, width, height):
        self.boxes.append((self.x, self.y, width, height, self.color))

    def line_to(self, x, y):
        self.x, self.y = x, y

    def text(self, text):
        self.texts.append((text, self.color))

    def text_width(self, text):
        return 10 * len(text)

    def ascent(self):
        return 15

    def descent(self):
        return 5

    def refresh(self):
        pass

    def events(self):
        return iter(())


def make(value=0):
    canvas = FakeCanvas()
    app = App(800, 800, canvas=canvas)
    calls = []
    tile = NumberTile(app, 10, 20, 50, 50, 2, 3, value, lambda r, c: calls.append((r, c)))
    return tile, canvas, calls


def key(char, code=None):
    return Event(EventType.KEY, keycode=code if code is not None else ord(char), keyutf8=char)


def test_initial_state():
    tile, _, _ = make()
    assert (tile.value, tile.row, tile.col) == (0, 2, 3)
    assert tile.locked is False
    assert tile.valid is True
    assert tile.app.widgets == [tile]


def test_digit_key_sets_value_and_reports():
    tile, _, calls = make()
    tile.handle(key("5"))
    assert tile.value == 5
    assert calls == [(2, 3)]


def test_same_digit_twice_reports_once():
    tile, _, calls = make()
    tile.handle(key("7"))
    tile.handle(key("7"))
    assert tile.value == 7
    assert calls == [(2, 3)]


def test_backspace_clears():
    tile, _, calls = make(value=4)
    tile.handle(Event(EventType.KEY, keycode=int(Key.BACKSPACE)))
    assert tile.value == 0
    assert calls == [(2, 3)]


def test_zero_key_clears():
    tile, _, calls = make(value=4)
    tile.handle(key("0"))
    assert tile.value == 0
    assert calls == [(2, 3)]


def test_non_digit_ignored():
    tile, _, calls = make(value=3)
    tile.handle(key("a"))
    assert tile.value == 3
    assert calls == []


def test_key_release_ignored():
    tile, _, calls = make()
    tile.handle(Event(EventType.KEY, keycode=-ord("5"), keyutf8="5"))
    assert tile.value == 0
    assert calls == []


def test_locked_ignores_input():
    tile, _, calls = make(value=6)
    tile.locked = True
    tile.handle(key("2"))
    tile.handle(key("0"))
    tile.enter_value(3)
    assert tile.value == 6
    assert calls == []


def test_set_value_does_not_report():
    tile, _, calls = make()
    tile.set_value(8)
    assert tile.value == 8
    assert calls == []


def test_set_value_works_when_locked():
    tile, _, _ = make()
    tile.locked = True
    tile.set_value(9)
    assert tile.value == 9


def test_out_of_range_current_value_blocks_change():
    tile, _, calls = make(value=12)
    tile.set_value(1)
    tile.enter_value(2)
    assert tile.value == 12
    assert calls == []


def test_draw_empty_has_no_text():
    tile, canvas, _ = make()
    tile.draw()
    assert canvas.texts == []
    assert canvas.boxes[0][4] == WHITE


def test_draw_valid_value_black():
    tile, canvas, _ = make(value=4)
    tile.draw()
    assert canvas.texts == [("4", BLACK)]


def test_draw_invalid_value_red():
    tile, canvas, _ = make(value=4)
    tile.valid = False
    tile.draw()
    assert canvas.texts == [("4", RED)]


def test_draw_background_by_state():
    tile, canvas, _ = make()
    tile.selected = True
    tile.draw()
    tile.locked = True
    tile.draw()
    assert [b[4] for b in canvas.boxes] == [GREY, LOCKED]
    assert canvas.boxes[0][:4] == (10, 20, 50, 50)