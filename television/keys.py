"""Terminal key events and the application's key representation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "KeyCode",
    "KeyModifiers",
    "KeyEventKind",
    "KeyEvent",
    "Key",
    "convert_raw_event_to_key",
]


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


@dataclass(frozen=True)
class KeyCode:
    """The physical key of a terminal key event.

    Most codes carry no payload; ``Char`` carries a character and ``F``
    carries the function key number.
    """

    name: str
    value: str | int | None = None

    BACKSPACE: ClassVar[KeyCode]
    ENTER: ClassVar[KeyCode]
    LEFT: ClassVar[KeyCode]
    RIGHT: ClassVar[KeyCode]
    UP: ClassVar[KeyCode]
    DOWN: ClassVar[KeyCode]
    HOME: ClassVar[KeyCode]
    END: ClassVar[KeyCode]
    PAGE_UP: ClassVar[KeyCode]
    PAGE_DOWN: ClassVar[KeyCode]
    TAB: ClassVar[KeyCode]
    BACK_TAB: ClassVar[KeyCode]
    DELETE: ClassVar[KeyCode]
    INSERT: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]
    NULL: ClassVar[KeyCode]
    CAPS_LOCK: ClassVar[KeyCode]
    SCROLL_LOCK: ClassVar[KeyCode]
    NUM_LOCK: ClassVar[KeyCode]
    PRINT_SCREEN: ClassVar[KeyCode]
    PAUSE: ClassVar[KeyCode]
    MENU: ClassVar[KeyCode]
    KEYPAD_BEGIN: ClassVar[KeyCode]
    MEDIA: ClassVar[KeyCode]
    MODIFIER: ClassVar[KeyCode]

    @classmethod
    def char(cls, c: str) -> KeyCode:
        return cls("Char", _check_char(c))

    @classmethod
    def f(cls, n: int) -> KeyCode:
        return cls("F", int(n))

    @property
    def is_char(self) -> bool:
        return self.name == "Char"

    @property
    def is_function(self) -> bool:
        return self.name == "F"


for _attr, _name in {
    "BACKSPACE": "Backspace",
    "ENTER": "Enter",
    "LEFT": "Left",
    "RIGHT": "Right",
    "UP": "Up",
    "DOWN": "Down",
    "HOME": "Home",
    "END": "End",
    "PAGE_UP": "PageUp",
    "PAGE_DOWN": "PageDown",
    "TAB": "Tab",
    "BACK_TAB": "BackTab",
    "DELETE": "Delete",
    "INSERT": "Insert",
    "ESC": "Esc",
    "NULL": "Null",
    "CAPS_LOCK": "CapsLock",
    "SCROLL_LOCK": "ScrollLock",
    "NUM_LOCK": "NumLock",
    "PRINT_SCREEN": "PrintScreen",
    "PAUSE": "Pause",
    "MENU": "Menu",
    "KEYPAD_BEGIN": "KeypadBegin",
    "MEDIA": "Media",
    "MODIFIER": "Modifier",
}.items():
    setattr(KeyCode, _attr, KeyCode(_name))


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000


class KeyEventKind(enum.Enum):
    """Whether a key was pressed, repeated or released."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A raw key event as read from the terminal."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


_KEY_LABELS = {
    "Backspace": "Backspace",
    "Enter": "Enter",
    "Left": "Left",
    "Right": "Right",
    "Up": "Up",
    "Down": "Down",
    "CtrlSpace": "Ctrl-Space",
    "CtrlBackspace": "Ctrl-Backspace",
    "CtrlEnter": "Ctrl-Enter",
    "CtrlLeft": "Ctrl-Left",
    "CtrlRight": "Ctrl-Right",
    "CtrlUp": "Ctrl-Up",
    "CtrlDown": "Ctrl-Down",
    "CtrlDelete": "Ctrl-Del",
    "AltSpace": "Alt-Space",
    "AltEnter": "Alt-Enter",
    "AltBackspace": "Alt-Backspace",
    "AltDelete": "Alt-Delete",
    "AltUp": "Alt-Up",
    "AltDown": "Alt-Down",
    "AltLeft": "Alt-Left",
    "AltRight": "Alt-Right",
    "Home": "Home",
    "End": "End",
    "PageUp": "PageUp",
    "PageDown": "PageDown",
    "BackTab": "BackTab",
    "Delete": "Delete",
    "Insert": "Insert",
    "Null": "Null",
    "Esc": "Esc",
    "Tab": "Tab",
    "MouseScrollUp": "MouseScrollUp",
    "MouseScrollDown": "MouseScrollDown",
}


@dataclass(frozen=True)
class Key:
    """A key as understood by the application, after modifiers are folded in.

    ``Char``, ``Alt`` and ``Ctrl`` carry a character, ``F`` carries the
    function key number; every other key has no payload.
    """

    name: str
    value: str | int | None = None

    BACKSPACE: ClassVar[Key]
    ENTER: ClassVar[Key]
    LEFT: ClassVar[Key]
    RIGHT: ClassVar[Key]
    UP: ClassVar[Key]
    DOWN: ClassVar[Key]
    CTRL_SPACE: ClassVar[Key]
    CTRL_BACKSPACE: ClassVar[Key]
    CTRL_ENTER: ClassVar[Key]
    CTRL_LEFT: ClassVar[Key]
    CTRL_RIGHT: ClassVar[Key]
    CTRL_UP: ClassVar[Key]
    CTRL_DOWN: ClassVar[Key]
    CTRL_DELETE: ClassVar[Key]
    ALT_SPACE: ClassVar[Key]
    ALT_ENTER: ClassVar[Key]
    ALT_BACKSPACE: ClassVar[Key]
    ALT_DELETE: ClassVar[Key]
    ALT_UP: ClassVar[Key]
    ALT_DOWN: ClassVar[Key]
    ALT_LEFT: ClassVar[Key]
    ALT_RIGHT: ClassVar[Key]
    HOME: ClassVar[Key]
    END: ClassVar[Key]
    PAGE_UP: ClassVar[Key]
    PAGE_DOWN: ClassVar[Key]
    BACK_TAB: ClassVar[Key]
    DELETE: ClassVar[Key]
    INSERT: ClassVar[Key]
    NULL: ClassVar[Key]
    ESC: ClassVar[Key]
    TAB: ClassVar[Key]
    MOUSE_SCROLL_UP: ClassVar[Key]
    MOUSE_SCROLL_DOWN: ClassVar[Key]

    @classmethod
    def char(cls, c: str) -> Key:
        return cls("Char", _check_char(c))

    @classmethod
    def alt(cls, c: str) -> Key:
        return cls("Alt", _check_char(c))

    @classmethod
    def ctrl(cls, c: str) -> Key:
        return cls("Ctrl", _check_char(c))

    @classmethod
    def f(cls, n: int) -> Key:
        return cls("F", int(n))

    def __str__(self) -> str:
        if self.name == "F":
            return f"F{self.value}"
        if self.name == "Char":
            return str(self.value)
        if self.name == "Alt":
            return f"Alt-{self.value}"
        if self.name == "Ctrl":
            return f"Ctrl-{self.value}"
        return _KEY_LABELS[self.name]


for _attr, _name in {
    "BACKSPACE": "Backspace",
    "ENTER": "Enter",
    "LEFT": "Left",
    "RIGHT": "Right",
    "UP": "Up",
    "DOWN": "Down",
    "CTRL_SPACE": "CtrlSpace",
    "CTRL_BACKSPACE": "CtrlBackspace",
    "CTRL_ENTER": "CtrlEnter",
    "CTRL_LEFT": "CtrlLeft",
    "CTRL_RIGHT": "CtrlRight",
    "CTRL_UP": "CtrlUp",
    "CTRL_DOWN": "CtrlDown",
    "CTRL_DELETE": "CtrlDelete",
    "ALT_SPACE": "AltSpace",
    "ALT_ENTER": "AltEnter",
    "ALT_BACKSPACE": "AltBackspace",
    "ALT_DELETE": "AltDelete",
    "ALT_UP": "AltUp",
    "ALT_DOWN": "AltDown",
    "ALT_LEFT": "AltLeft",
    "ALT_RIGHT": "AltRight",
    "HOME": "Home",
    "END": "End",
    "PAGE_UP": "PageUp",
    "PAGE_DOWN": "PageDown",
    "BACK_TAB": "BackTab",
    "DELETE": "Delete",
    "INSERT": "Insert",
    "NULL": "Null",
    "ESC": "Esc",
    "TAB": "Tab",
    "MOUSE_SCROLL_UP": "MouseScrollUp",
    "MOUSE_SCROLL_DOWN": "MouseScrollDown",
}.items():
    setattr(Key, _attr, Key(_name))


# code -> (plain, with control, with alt)
_MODIFIABLE = {
    KeyCode.BACKSPACE: (Key.BACKSPACE, Key.CTRL_BACKSPACE, Key.ALT_BACKSPACE),
    KeyCode.DELETE: (Key.DELETE, Key.CTRL_DELETE, Key.ALT_DELETE),
    KeyCode.ENTER: (Key.ENTER, Key.CTRL_ENTER, Key.ALT_ENTER),
    KeyCode.UP: (Key.UP, Key.CTRL_UP, Key.ALT_UP),
    KeyCode.DOWN: (Key.DOWN, Key.CTRL_DOWN, Key.ALT_DOWN),
    KeyCode.LEFT: (Key.LEFT, Key.CTRL_LEFT, Key.ALT_LEFT),
    KeyCode.RIGHT: (Key.RIGHT, Key.CTRL_RIGHT, Key.ALT_RIGHT),
}

_PLAIN = {
    KeyCode.HOME: Key.HOME,
    KeyCode.END: Key.END,
    KeyCode.PAGE_UP: Key.PAGE_UP,
    KeyCode.PAGE_DOWN: Key.PAGE_DOWN,
    KeyCode.TAB: Key.TAB,
    KeyCode.BACK_TAB: Key.BACK_TAB,
    KeyCode.INSERT: Key.INSERT,
    KeyCode.ESC: Key.ESC,
}


def convert_raw_event_to_key(event: KeyEvent) -> Key:
    """Fold a raw key event and its modifiers into a single ``Key``."""
    if event.kind is KeyEventKind.RELEASE:
        return Key.NULL

    code, mods = event.code, event.modifiers

    if code in _MODIFIABLE:
        plain, with_ctrl, with_alt = _MODIFIABLE[code]
        if mods == KeyModifiers.CONTROL:
            return with_ctrl
        if mods == KeyModifiers.ALT:
            return with_alt
        return plain

    if code in _PLAIN:
        return _PLAIN[code]

    if code.is_function:
        return Key.f(code.value)

    if code.is_char:
        c = code.value
        if mods in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return Key.char(c)
        if c == " ":
            if mods == KeyModifiers.CONTROL:
                return Key.CTRL_SPACE
            if mods == KeyModifiers.ALT:
                return Key.ALT_SPACE
            return Key.NULL
        if mods == KeyModifiers.CONTROL:
            return Key.ctrl(c)
        if mods == KeyModifiers.ALT:
            return Key.alt(c)
        return Key.NULL

    return Key.NULL