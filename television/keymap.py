"""Routing tables from keys to the actions they trigger."""

from __future__ import annotations

from collections.abc import Mapping

from television.keybindings import Binding
from television.keys import Key

__all__ = ["Keymap", "keymap_from_keybindings"]


class Keymap(dict[Key, str]):
    """Maps each key to the action it triggers."""

    def merge(self, other: Mapping[Key, str]) -> None:
        """Copy every entry of ``other`` into this keymap, overwriting clashes."""
        self.update(other)


def keymap_from_keybindings(keybindings: Mapping[str, Binding]) -> Keymap:
    """Invert action-to-binding mappings into a key-to-action keymap."""
    return Keymap(
        (key, action)
        for action, binding in keybindings.items()
        for key in binding
    )