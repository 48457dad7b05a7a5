"""Parsing of key descriptions and the action-to-key bindings built from them."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from television.keys import (
    Key,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    convert_raw_event_to_key,
)

__all__ = [
    "KeyParseError",
    "Binding",
    "KeyBindings",
    "merge_keybindings",
    "parse_key_event",
    "key_event_to_string",
    "parse_key",
    "parse_binding",
    "keybindings_from_dict",
]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_MODIFIER_PREFIXES = (
    ("ctrl-", KeyModifiers.CONTROL),
    ("shift-", KeyModifiers.SHIFT),
    ("alt-", KeyModifiers.ALT),
    ("cmd-", KeyModifiers.SUPER),
    ("super-", KeyModifiers.SUPER),
)

_NAMED_CODES = {
    "esc": KeyCode.ESC,
    "enter": KeyCode.ENTER,
    "left": KeyCode.LEFT,
    "right": KeyCode.RIGHT,
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "backspace": KeyCode.BACKSPACE,
    "delete": KeyCode.DELETE,
    "insert": KeyCode.INSERT,
    "space": KeyCode.char(" "),
    " ": KeyCode.char(" "),
    "hyphen": KeyCode.char("-"),
    "minus": KeyCode.char("-"),
    "tab": KeyCode.TAB,
    **{f"f{n}": KeyCode.f(n) for n in range(1, 13)},
}

_CODE_NAMES = {
    "Backspace": "backspace",
    "Enter": "enter",
    "Left": "left",
    "Right": "right",
    "Up": "up",
    "Down": "down",
    "Home": "home",
    "End": "end",
    "PageUp": "pageup",
    "PageDown": "pagedown",
    "Tab": "tab",
    "BackTab": "backtab",
    "Delete": "delete",
    "Insert": "insert",
    "Esc": "esc",
}


class KeyParseError(ValueError):
    """Raised when a key or binding description cannot be understood."""


@dataclass(frozen=True)
class Binding:
    """One or several keys bound to an action.

    A binding written as a single key and one written as a list are kept
    apart, as they are in the configuration file.
    """

    keys: tuple[Key, ...]
    multiple: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))
        if not self.multiple and len(self.keys) != 1:
            raise ValueError("a single-key binding holds exactly one key")

    def __iter__(self) -> Iterator[Key]:
        return iter(self.keys)

    def __str__(self) -> str:
        return ", ".join(str(key) for key in self.keys)


class KeyBindings(dict[str, Binding]):
    """Maps action names to the keys that trigger them."""


def merge_keybindings(
    keybindings: Mapping[str, Binding], new_keybindings: Mapping[str, Binding]
) -> KeyBindings:
    """Return ``keybindings`` overlaid with ``new_keybindings``.

    Bindings for an action present in both are replaced, not combined.
    """
    merged = KeyBindings(keybindings)
    merged.update(new_keybindings)
    return merged


def _extract_modifiers(raw: str) -> tuple[str, KeyModifiers]:
    modifiers = KeyModifiers.NONE
    current = raw
    while True:
        for prefix, modifier in _MODIFIER_PREFIXES:
            if current.startswith(prefix):
                modifiers |= modifier
                current = current[len(prefix):]
                break
        else:
            return current, modifiers


def _parse_key_code(raw: str, modifiers: KeyModifiers) -> KeyEvent:
    if raw == "backtab":
        return KeyEvent(KeyCode.BACK_TAB, modifiers | KeyModifiers.SHIFT)
    code = _NAMED_CODES.get(raw)
    if code is None:
        if len(raw.encode("utf-8")) != 1:
            raise KeyParseError(f"Unable to parse {raw}")
        c = raw
        if KeyModifiers.SHIFT in modifiers:
            c = c.upper()
        code = KeyCode.char(c)
    return KeyEvent(code, modifiers)


def parse_key_event(raw: str) -> KeyEvent:
    """Parse a description such as ``ctrl-alt-a`` into a raw key event."""
    remaining, modifiers = _extract_modifiers(raw.translate(_ASCII_LOWER))
    return _parse_key_code(remaining, modifiers)


def key_event_to_string(key_event: KeyEvent) -> str:
    """Describe a key event in the same syntax ``parse_key_event`` reads."""
    code = key_event.code
    if code.is_function:
        key_code = f"f({code.value})"
    elif code.is_char:
        key_code = "space" if code.value == " " else str(code.value)
    else:
        key_code = _CODE_NAMES.get(code.name, "")

    mods = key_event.modifiers
    names = []
    if KeyModifiers.CONTROL in mods:
        names.append("ctrl")
    if KeyModifiers.SHIFT in mods:
        names.append("shift")
    if KeyModifiers.SUPER in mods:
        names.append("cmd" if sys.platform == "darwin" else "super")
    if KeyModifiers.ALT in mods:
        names.append("alt")

    prefix = "-".join(names)
    return f"{prefix}-{key_code}" if prefix else key_code


def parse_key(raw: str) -> Key:
    """Parse a key description, optionally wrapped in angle brackets."""
    if raw.count(">") != raw.count("<"):
        raise KeyParseError(f"Unable to parse `{raw}`")
    if "><" not in raw:
        raw = raw.removeprefix("<").removesuffix(">")

    lowered = raw.translate(_ASCII_LOWER)
    if lowered == "mousescrollup":
        return Key.MOUSE_SCROLL_UP
    if lowered == "mousescrolldown":
        return Key.MOUSE_SCROLL_DOWN

    return convert_raw_event_to_key(parse_key_event(raw))


def parse_binding(value: str | Iterable[str]) -> Binding:
    """Build a binding from a key string or a list of key strings."""
    if isinstance(value, str):
        return Binding((parse_key(value),))
    if isinstance(value, (list, tuple)):
        keys = []
        for item in value:
            if not isinstance(item, str):
                raise KeyParseError(f"invalid key {item!r}")
            keys.append(parse_key(item))
        return Binding(tuple(keys), multiple=True)
    raise KeyParseError(f"invalid binding {value!r}")


def keybindings_from_dict(data: Mapping[str, object]) -> KeyBindings:
    """Build keybindings from a mapping such as a parsed TOML table."""
    return KeyBindings(
        (action, parse_binding(value)) for action, value in data.items()
    )