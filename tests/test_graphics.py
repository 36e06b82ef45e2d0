import pygame
import pytest

from sudokupad.graphics import (
    Canvas,
    Color,
    Event,
    EventType,
    Key,
    MouseButton,
    translate_event,
    utf8_character_split,
    utf8_remove_last,
)


def test_key_constants_follow_layout():
    up = translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP, unicode="", mod=0))
    down = translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN, unicode="", mod=0))
    assert up.keycode == 0x10000
    assert down.keycode == up.keycode + 1
    assert Key.F0 == 0x20000
    assert Key.F15 == Key.F0 + 15


def test_mouse_press_translation():
    raw = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20))
    ev = translate_event(raw)
    assert ev.type == EventType.MOUSE
    assert ev.button == MouseButton.LEFT
    assert (ev.pos_x, ev.pos_y) == (10, 20)


def test_mouse_release_is_negated():
    raw = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(3, 4))
    ev = translate_event(raw)
    assert ev.button == -MouseButton.LEFT


def test_wheel_buttons():
    raw = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=5, pos=(0, 0))
    assert translate_event(raw).button == MouseButton.WHEEL_DOWN


def test_motion_has_no_button():
    raw = pygame.event.Event(pygame.MOUSEMOTION, pos=(7, 8), rel=(1, 1), buttons=(0, 0, 0))
    ev = translate_event(raw)
    assert ev.button == 0
    assert (ev.pos_x, ev.pos_y) == (7, 8)


def test_backspace_key():
    raw = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE, unicode="\b", mod=0)
    ev = translate_event(raw)
    assert ev.type == EventType.KEY
    assert ev.keycode == Key.BACKSPACE


def test_digit_key_carries_text():
    raw = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_5, unicode="5", mod=0)
    ev = translate_event(raw)
    assert ev.keyutf8 == "5"
    assert ev.keycode > 0


def test_arrow_key_maps_to_key_code():
    raw = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT, unicode="", mod=0)
    assert translate_event(raw).keycode == Key.LEFT


def test_key_release_is_negated():
    down = translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, unicode="a", mod=0))
    up = translate_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a, mod=0))
    assert up.keycode == -down.keycode
    assert up.keyutf8 == ""


def test_quit_is_not_an_event():
    assert translate_event(pygame.event.Event(pygame.QUIT)) is None


def test_event_defaults():
    ev = Event(EventType.TIMER)
    assert (ev.keycode, ev.button, ev.keyutf8) == (0, 0, "")


def test_utf8_split_keeps_multibyte_characters():
    assert utf8_character_split("ábc") == ["á", "b", "c"]


def test_utf8_remove_last():
    assert utf8_remove_last("Gratulálunk") == "Gratulálun"
    assert utf8_remove_last("") == ""


def test_color_rgb():
    assert Color(200, 255, 200).rgb == (200, 255, 200)


@pytest.fixture
def canvas(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    surface = Canvas(100, 100, None, 16)
    yield surface
    pygame.quit()


def test_box_fills_pixels(canvas):
    canvas.set_color(Color(255, 0, 0))
    canvas.move_to(10, 10)
    canvas.box(5, 5)
    assert tuple(canvas.surface.get_at((12, 12)))[:3] == (255, 0, 0)
    assert tuple(canvas.surface.get_at((14, 14)))[:3] == (255, 0, 0)
    assert tuple(canvas.surface.get_at((15, 15)))[:3] == (0, 0, 0)


def test_line_to_moves_pen(canvas):
    canvas.move_to(1, 2)
    canvas.line_to(30, 40)
    assert (canvas.x, canvas.y) == (30, 40)


def test_text_metrics(canvas):
    assert canvas.text_width("") == 0
    assert canvas.text_width("ab") > canvas.text_width("a")
    assert canvas.ascent() > 0
    assert canvas.descent() >= 0