# television

Building blocks for a terminal fuzzy finder, usable on their own. The
package has no dependencies outside the standard library.

- **Keys** (`television.keys`): terminal key events (`KeyEvent`, `KeyCode`,
  `KeyModifiers`, `KeyEventKind`) and their conversion to application keys
  (`Key`) through `convert_raw_event_to_key`. Key releases become `Key.NULL`;
  Ctrl and Alt are folded into keys such as `Key.ctrl("c")` or
  `Key.ALT_ENTER`. `str(key)` gives a label such as `Ctrl-c` or `PageDown`.
- **Keybindings** (`television.keybindings`): parse key descriptions such as
  `"ctrl-alt-a"`, `"<esc>"` or `"pagedown"` with `parse_key` (or
  `parse_key_event` for the raw event), describe events back with
  `key_event_to_string`, build action bindings from configuration data with
  `parse_binding` and `keybindings_from_dict`, and layer user bindings over
  defaults with `merge_keybindings`. Unreadable descriptions raise
  `KeyParseError`.
- **Keymaps** (`television.keymap`): turn keybindings into a key → action
  routing table with `keymap_from_keybindings` and combine tables with
  `Keymap.merge`, where the merged-in table wins on clashes.
- **UI features** (`television.feature_state`, `television.features`):
  `FeatureState` tracks whether a feature is enabled and visible;
  `Features` holds the state of the preview panel, help panel, status bar
  and remote control, addressed by `FeatureFlags`. By default the preview
  panel and status bar are active and the other two are enabled but hidden.
- **Shell integration** (`television.shell_integration`):
  `ShellIntegrationConfig` maps shell commands to channels, folds
  `channel_triggers` into `commands` with `merge_triggers`, and finds the
  Ctrl characters for the shell widgets (`T` and `R` unless configured).
  `shell_integration_from_dict` builds it from a parsed TOML table.
- **History** (`television.history_entry`, `television.history`):
  `HistoryEntry` records a query, its channel and a timestamp;
  `load_entries` and `dump_entries` read and write the JSON file format.
  `History` is a size-limited search history kept in `history.json`, with
  per-channel or global navigation through `previous_entry` and
  `next_entry`.

## Installation

```
pip install .
```

## Examples

Parse keys and build a keymap:

```python
from television.keybindings import keybindings_from_dict, parse_key
from television.keymap import keymap_from_keybindings

bindings = keybindings_from_dict({
    "quit": ["esc", "ctrl-c"],
    "select_next_entry": "down",
})
keymap = keymap_from_keybindings(bindings)
action = keymap[parse_key("ctrl-c")]    # "quit"
```

Toggle UI features:

```python
from television.feature_state import FeatureFlags
from television.features import Features

features = Features()
features.hide(FeatureFlags.PREVIEW_PANEL)
features.is_enabled(FeatureFlags.PREVIEW_PANEL)   # True
features.is_active(FeatureFlags.PREVIEW_PANEL)    # False
```

Browse search history for one channel:

```python
from pathlib import Path
from television.history import History

history = History(200, "files", False, Path("~/.local/share/television").expanduser())
history.init()
history.add_entry("main.rs", "files")
entry = history.previous_entry()
history.save()
```

## What the package does not do

It is a library of parts, not a finder: there is no command to run, no
terminal screen, no event loop reading the keyboard, and no matching of
entries. It does not read color themes, and it does not read or write
feature states as TOML; `Features` lives in memory only. Configuration
tables for keybindings and shell integration must already be parsed (for
example with `tomllib`) before they are handed to `keybindings_from_dict`
or `shell_integration_from_dict`.

## Running the tests

```
pip install ".[test]"
pytest
```