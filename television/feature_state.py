"""The enabled/visible state of a single UI feature and the flags naming each feature."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["FeatureState", "FeatureFlags"]


@dataclass(order=True)
class FeatureState:
    """Whether a UI feature is enabled and whether it is visible.

    A feature is in one of three meaningful states: active (enabled and
    visible), hidden (enabled but not visible) or disabled (neither).
    The default state is disabled.
    """

    enabled: bool = False
    visible: bool = False

    @classmethod
    def active(cls) -> FeatureState:
        """An enabled and visible feature."""
        return cls(True, True)

    @classmethod
    def disabled(cls) -> FeatureState:
        """A disabled, hidden feature."""
        return cls(False, False)

    @classmethod
    def hidden(cls) -> FeatureState:
        """An enabled feature that is not shown."""
        return cls(True, False)

    def is_active(self) -> bool:
        """True when the feature is both enabled and visible."""
        return self.enabled and self.visible

    def toggle_enabled(self) -> None:
        """Flip the enabled state; disabling also hides the feature."""
        self.enabled = not self.enabled
        if not self.enabled:
            self.visible = False

    def toggle_visible(self) -> None:
        """Flip visibility; has no effect on a disabled feature."""
        if self.enabled:
            self.visible = not self.visible

    def enable(self) -> None:
        """Make the feature enabled and visible."""
        self.enabled = True
        self.visible = True

    def disable(self) -> None:
        """Make the feature disabled and hidden."""
        self.enabled = False
        self.visible = False

    def show(self) -> None:
        """Make the feature visible if it is enabled."""
        if self.enabled:
            self.visible = True

    def hide(self) -> None:
        """Hide the feature, keeping its enabled state."""
        self.visible = False


class FeatureFlags(enum.Enum):
    """The features of the UI, named as in configuration files."""

    PREVIEW_PANEL = "preview_panel"
    HELP_PANEL = "help_panel"
    STATUS_BAR = "status_bar"
    REMOTE_CONTROL = "remote_control"