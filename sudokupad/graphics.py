"""Drawing surface, colours and input events on top of pygame."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Color:
    """An RGB colour."""

    red: int
    green: int
    blue: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class EventType(enum.IntEnum):
    KEY = 1
    MOUSE = 2
    TIMER = 3


class MouseButton(enum.IntEnum):
    """Mouse buttons; a release is reported as the negated value."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class Key(enum.IntEnum):
    """Key codes for keys that have no printable character."""

    TAB = ord("\t")
    BACKSPACE = ord("\b")
    ENTER = ord("\r")
    ESCAPE = 0o33
    SPACE = ord(" ")
    UP = 0x10000
    DOWN = 0x10001
    RIGHT = 0x10002
    LEFT = 0x10003
    INSERT = 0x10004
    DELETE = 0x10005
    HOME = 0x10006
    END = 0x10007
    PGUP = 0x10008
    PGDN = 0x10009
    LSHIFT = 0x1000A
    RSHIFT = 0x1000B
    LCTRL = 0x1000C
    RCTRL = 0x1000D
    LALT = 0x1000E
    RALT = 0x1000F
    LWIN = 0x10010
    RWIN = 0x10011
    MENU = 0x10012
    NUML = 0x10013
    CAPSL = 0x10014
    SCRL = 0x10015
    F0 = 0x20000
    F1 = 0x20001
    F2 = 0x20002
    F3 = 0x20003
    F4 = 0x20004
    F5 = 0x20005
    F6 = 0x20006
    F7 = 0x20007
    F8 = 0x20008
    F9 = 0x20009
    F10 = 0x2000A
    F11 = 0x2000B
    F12 = 0x2000C
    F13 = 0x2000D
    F14 = 0x2000E
    F15 = 0x2000F


@dataclass
class Event:
    """One input event.

    Key releases carry a negated key code, mouse releases a negated button.
    """

    type: int
    keycode: int = 0
    pos_x: int = 0
    pos_y: int = 0
    button: int = 0
    time: int = 0
    keyname: str = ""
    keyutf8: str = ""


_KEYS = {
    pygame.K_TAB: Key.TAB,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_INSERT: Key.INSERT,
    pygame.K_DELETE: Key.DELETE,
    pygame.K_HOME: Key.HOME,
    pygame.K_END: Key.END,
    pygame.K_PAGEUP: Key.PGUP,
    pygame.K_PAGEDOWN: Key.PGDN,
    pygame.K_LSHIFT: Key.LSHIFT,
    pygame.K_RSHIFT: Key.RSHIFT,
    pygame.K_LCTRL: Key.LCTRL,
    pygame.K_RCTRL: Key.RCTRL,
    pygame.K_LALT: Key.LALT,
    pygame.K_RALT: Key.RALT,
    pygame.K_LGUI: Key.LWIN,
    pygame.K_RGUI: Key.RWIN,
    pygame.K_MENU: Key.MENU,
    pygame.K_NUMLOCK: Key.NUML,
    pygame.K_CAPSLOCK: Key.CAPSL,
    pygame.K_SCROLLOCK: Key.SCRL,
    pygame.K_F1: Key.F1,
    pygame.K_F2: Key.F2,
    pygame.K_F3: Key.F3,
    pygame.K_F4: Key.F4,
    pygame.K_F5: Key.F5,
    pygame.K_F6: Key.F6,
    pygame.K_F7: Key.F7,
    pygame.K_F8: Key.F8,
    pygame.K_F9: Key.F9,
    pygame.K_F10: Key.F10,
    pygame.K_F11: Key.F11,
    pygame.K_F12: Key.F12,
    pygame.K_F13: Key.F13,
    pygame.K_F14: Key.F14,
    pygame.K_F15: Key.F15,
}


def _key_name(key: int) -> str:
    try:
        return pygame.key.name(key)
    except pygame.error:
        return ""


def translate_event(raw: pygame.event.Event) -> Event | None:
    """Turn a pygame event into an Event, or None if it is not one we use."""
    now = pygame.time.get_ticks()
    kind = raw.type
    if kind == pygame.MOUSEBUTTONDOWN:
        x, y = raw.pos
        return Event(EventType.MOUSE, pos_x=x, pos_y=y, button=raw.button, time=now)
    if kind == pygame.MOUSEBUTTONUP:
        x, y = raw.pos
        return Event(EventType.MOUSE, pos_x=x, pos_y=y, button=-raw.button, time=now)
    if kind == pygame.MOUSEMOTION:
        x, y = raw.pos
        return Event(EventType.MOUSE, pos_x=x, pos_y=y, button=0, time=now)
    if kind in (pygame.KEYDOWN, pygame.KEYUP):
        code = int(_KEYS.get(raw.key, raw.key))
        pressed = kind == pygame.KEYDOWN
        return Event(
            EventType.KEY,
            keycode=code if pressed else -code,
            time=now,
            keyname=_key_name(raw.key),
            keyutf8=getattr(raw, "unicode", "") if pressed else "",
        )
    return None


def utf8_character_split(text: str) -> list[str]:
    """The characters of text, one string each."""
    return list(text)


def utf8_remove_last(text: str) -> str:
    """text without its last character."""
    return text[:-1]


def _sgn(value: int) -> int:
    return (value > 0) - (value < 0)


class Canvas:
    """A window with a pen position, a current colour and a font."""

    def __init__(
        self,
        width: int,
        height: int,
        font_name: str | None = None,
        font_size: int = 16,
    ) -> None:
        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode((width, height))
        try:
            self._font = pygame.font.Font(font_name, font_size)
        except (OSError, FileNotFoundError):
            self._font = pygame.font.Font(None, font_size)
        self._color = WHITE
        self.x = 0
        self.y = 0

    def set_color(self, color: Color) -> None:
        self._color = color

    def move_to(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def box(self, width: int, height: int) -> None:
        """Fill a width by height rectangle from the pen position."""
        if not width and not height:
            return
        dx = width - _sgn(width)
        dy = height - _sgn(height)
        left, right = sorted((self.x, self.x + dx))
        top, bottom = sorted((self.y, self.y + dy))
        rect = pygame.Rect(left, top, right - left + 1, bottom - top + 1)
        self.surface.fill(self._color.rgb, rect)

    def line_to(self, x: int, y: int) -> None:
        """Draw a line from the pen to (x, y) and move the pen there."""
        pygame.draw.line(self.surface, self._color.rgb, (self.x, self.y), (x, y))
        self.x, self.y = x, y

    def text(self, text: str) -> None:
        if not text:
            return
        rendered = self._font.render(text, True, self._color.rgb)
        self.surface.blit(rendered, (self.x, self.y))

    def text_width(self, text: str) -> int:
        return self._font.size(text)[0]

    def ascent(self) -> int:
        return self._font.get_ascent()

    def descent(self) -> int:
        return -self._font.get_descent()

    def refresh(self) -> None:
        pygame.display.flip()

    def events(self) -> Iterator[Event]:
        """Yield input events until the window is closed."""
        while True:
            raw = pygame.event.wait()
            if raw.type == pygame.QUIT:
                return
            event = translate_event(raw)
            if event is not None:
                yield event