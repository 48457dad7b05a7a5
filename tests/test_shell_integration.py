import pytest

from television.keybindings import KeyParseError, parse_binding
from television.keys import Key
from television.shell_integration import (
    ShellIntegrationConfig,
    shell_integration_from_dict,
)


def test_defaults_when_no_keybindings():
    config = ShellIntegrationConfig()
    assert config.get_shell_autocomplete_keybinding_character() == "T"
    assert config.get_command_history_keybinding_character() == "R"


def test_ctrl_binding_gives_upper_case_char():
    config = ShellIntegrationConfig(
        keybindings={
            "command_history": parse_binding("ctrl-h"),
            "smart_autocomplete": parse_binding("ctrl-t"),
        }
    )
    assert config.get_command_history_keybinding_character() == "h".upper()
    assert config.get_shell_autocomplete_keybinding_character() == "t".upper()


def test_ctrl_space_binding():
    config = ShellIntegrationConfig(
        keybindings={"smart_autocomplete": parse_binding("ctrl-space")}
    )
    assert config.get_shell_autocomplete_keybinding_character() == " "


def test_non_ctrl_binding_falls_back_to_default():
    config = ShellIntegrationConfig(
        keybindings={
            "smart_autocomplete": parse_binding("alt-x"),
            "command_history": parse_binding("esc"),
        }
    )
    assert config.get_shell_autocomplete_keybinding_character() == "T"
    assert config.get_command_history_keybinding_character() == "R"


def test_multiple_keys_uses_first():
    config = ShellIntegrationConfig(
        keybindings={"command_history": parse_binding(["ctrl-e", "ctrl-f"])}
    )
    assert config.get_command_history_keybinding_character() == "e".upper()

    config = ShellIntegrationConfig(
        keybindings={"command_history": parse_binding(["esc", "ctrl-f"])}
    )
    assert config.get_command_history_keybinding_character() == "R"


def test_merge_triggers_from_channel_triggers():
    config = shell_integration_from_dict(
        {"channel_triggers": {"files": ["some command"]}}
    )
    config.merge_triggers()
    assert config.commands == {"some command": "files"}


def test_merge_triggers_overrides_existing_commands():
    config = ShellIntegrationConfig(
        commands={"git add": "git-diff", "ls": "dirs"},
        channel_triggers={"files": ["ls", "cat"]},
    )
    config.merge_triggers()
    assert config.commands == {"git add": "git-diff", "ls": "files", "cat": "files"}


def test_merge_triggers_is_idempotent():
    config = ShellIntegrationConfig(channel_triggers={"files": ["cat", "less"]})
    config.merge_triggers()
    first = dict(config.commands)
    config.merge_triggers()
    assert config.commands == first


def test_from_dict_reads_all_fields():
    config = shell_integration_from_dict(
        {
            "commands": {"git add": "git-diff"},
            "fallback_channel": "files",
            "keybindings": {"command_history": "ctrl-h"},
            "unknown": 1,
        }
    )
    assert config.commands == {"git add": "git-diff"}
    assert config.fallback_channel == "files"
    assert config.keybindings["command_history"].keys == (Key.ctrl("h"),)
    assert config.channel_triggers == {}


def test_from_empty_dict_gives_defaults():
    assert shell_integration_from_dict({}) == ShellIntegrationConfig()


def test_from_dict_rejects_bad_key():
    with pytest.raises(KeyParseError):
        shell_integration_from_dict({"keybindings": {"command_history": "ctrl-invalid-key"}})


def test_from_dict_rejects_bad_triggers():
    with pytest.raises(ValueError):
        shell_integration_from_dict({"channel_triggers": {"files": "cat"}})


def test_from_dict_rejects_bad_fallback():
    with pytest.raises(ValueError):
        shell_integration_from_dict({"fallback_channel": 3})