"""The collection of UI features and their individual states."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from television.feature_state import FeatureFlags, FeatureState

__all__ = ["Features"]


@dataclass
class Features:
    """The state of every UI feature.

    By default the preview panel and status bar are active, while the help
    panel and remote control are enabled but hidden.
    """

    preview_panel: FeatureState = field(default_factory=FeatureState.active)
    help_panel: FeatureState = field(default_factory=FeatureState.hidden)
    status_bar: FeatureState = field(default_factory=FeatureState.active)
    remote_control: FeatureState = field(default_factory=FeatureState.hidden)

    def get_state(self, flag: FeatureFlags) -> FeatureState:
        """Return a copy of the state of the feature named by ``flag``."""
        return replace(getattr(self, flag.value))

    def set_state(self, flag: FeatureFlags, state: FeatureState) -> None:
        """Replace the state of the feature named by ``flag``."""
        setattr(self, flag.value, replace(state))

    def is_active(self, flag: FeatureFlags) -> bool:
        """True when the feature is enabled and visible."""
        return self.get_state(flag).is_active()

    def is_enabled(self, flag: FeatureFlags) -> bool:
        """True when the feature is enabled, whether shown or not."""
        return self.get_state(flag).enabled

    def is_visible(self, flag: FeatureFlags) -> bool:
        """True when the feature is marked visible."""
        return self.get_state(flag).visible

    def toggle_enabled(self, flag: FeatureFlags) -> None:
        """Flip whether the feature is enabled; disabling also hides it."""
        getattr(self, flag.value).toggle_enabled()

    def toggle_visible(self, flag: FeatureFlags) -> None:
        """Flip the feature's visibility if it is enabled."""
        getattr(self, flag.value).toggle_visible()

    def enable(self, flag: FeatureFlags) -> None:
        """Make the feature enabled and visible."""
        getattr(self, flag.value).enable()

    def disable(self, flag: FeatureFlags) -> None:
        """Make the feature disabled and hidden."""
        getattr(self, flag.value).disable()

    def show(self, flag: FeatureFlags) -> None:
        """Make the feature visible if it is enabled."""
        getattr(self, flag.value).show()

    def hide(self, flag: FeatureFlags) -> None:
        """Hide the feature, keeping whether it is enabled."""
        getattr(self, flag.value).hide()