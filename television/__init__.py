"""Key parsing, keybindings, keymaps, UI feature states, shell integration settings and search history for a fuzzy finder."""

__version__ = "0.11.9"