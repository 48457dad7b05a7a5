"""Shell integration settings: command triggers and shell keybindings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from television.keybindings import Binding, parse_binding
from television.keys import Key

__all__ = ["ShellIntegrationConfig", "shell_integration_from_dict"]

SMART_AUTOCOMPLETE_CONFIGURATION_KEY = "smart_autocomplete"
COMMAND_HISTORY_CONFIGURATION_KEY = "command_history"
DEFAULT_SHELL_AUTOCOMPLETE_KEY = "T"
DEFAULT_COMMAND_HISTORY_KEY = "R"


def _extract_ctrl_char(binding: Binding) -> str | None:
    """Upper-case character of a binding's first key if it is a Ctrl key."""
    if not binding.keys:
        return None
    key = binding.keys[0]
    if key.name == "Ctrl":
        c = str(key.value)
        return c.upper() if c.isascii() else c
    if key == Key.CTRL_SPACE:
        return " "
    return None


@dataclass
class ShellIntegrationConfig:
    """How the shell hands commands to channels and which keys trigger it.

    ``commands`` maps a command to a channel (the older format);
    ``channel_triggers`` maps a channel to the commands that trigger it.
    """

    commands: dict[str, str] = field(default_factory=dict)
    channel_triggers: dict[str, list[str]] = field(default_factory=dict)
    fallback_channel: str = ""
    keybindings: dict[str, Binding] = field(default_factory=dict)

    def merge_triggers(self) -> None:
        """Fold ``channel_triggers`` into ``commands`` as command-to-channel entries."""
        self.commands.update(
            (command, channel)
            for channel, triggers in self.channel_triggers.items()
            for command in triggers
        )

    def _ctrl_char_for(self, name: str, default: str) -> str:
        binding = self.keybindings.get(name)
        if binding is None:
            return default
        c = _extract_ctrl_char(binding)
        return default if c is None else c

    def get_shell_autocomplete_keybinding_character(self) -> str:
        """The Ctrl character that starts smart autocomplete in the shell."""
        return self._ctrl_char_for(
            SMART_AUTOCOMPLETE_CONFIGURATION_KEY, DEFAULT_SHELL_AUTOCOMPLETE_KEY
        )

    def get_command_history_keybinding_character(self) -> str:
        """The Ctrl character that starts command history search in the shell."""
        return self._ctrl_char_for(
            COMMAND_HISTORY_CONFIGURATION_KEY, DEFAULT_COMMAND_HISTORY_KEY
        )


def _str_mapping(value: object, name: str) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ValueError(f"`{name}` must be a table")
    result = {}
    for k, v in value.items():
        if not isinstance(v, str):
            raise ValueError(f"invalid value for `{name}.{k}`: {v!r}")
        result[str(k)] = v
    return result


def _triggers_mapping(value: object) -> dict[str, list[str]]:
    if not isinstance(value, Mapping):
        raise ValueError("`channel_triggers` must be a table")
    result = {}
    for channel, triggers in value.items():
        if not isinstance(triggers, (list, tuple)) or not all(
            isinstance(t, str) for t in triggers
        ):
            raise ValueError(f"invalid triggers for channel `{channel}`: {triggers!r}")
        result[str(channel)] = list(triggers)
    return result


def shell_integration_from_dict(data: Mapping[str, object]) -> ShellIntegrationConfig:
    """Build the configuration from a parsed TOML table; missing fields take defaults."""
    config = ShellIntegrationConfig()
    if "commands" in data:
        config.commands = _str_mapping(data["commands"], "commands")
    if "channel_triggers" in data:
        config.channel_triggers = _triggers_mapping(data["channel_triggers"])
    if "fallback_channel" in data:
        fallback = data["fallback_channel"]
        if not isinstance(fallback, str):
            raise ValueError(f"invalid value for `fallback_channel`: {fallback!r}")
        config.fallback_channel = fallback
    if "keybindings" in data:
        raw = data["keybindings"]
        if not isinstance(raw, Mapping):
            raise ValueError("`keybindings` must be a table")
        config.keybindings = {
            str(name): parse_binding(value) for name, value in raw.items()
        }
    return config