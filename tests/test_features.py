import pytest

from television.feature_state import FeatureFlags, FeatureState
from television.features import Features


def test_features_operations():
    features = Features()

    assert features.is_active(FeatureFlags.PREVIEW_PANEL)

    features.hide(FeatureFlags.PREVIEW_PANEL)
    assert features.is_enabled(FeatureFlags.PREVIEW_PANEL)
    assert not features.is_visible(FeatureFlags.PREVIEW_PANEL)
    assert not features.is_active(FeatureFlags.PREVIEW_PANEL)

    features.show(FeatureFlags.PREVIEW_PANEL)
    assert features.is_active(FeatureFlags.PREVIEW_PANEL)

    assert not features.is_active(FeatureFlags.HELP_PANEL)

    features.enable(FeatureFlags.HELP_PANEL)
    assert features.is_active(FeatureFlags.HELP_PANEL)


def test_defaults():
    features = Features()
    assert features.preview_panel == FeatureState(True, True)
    assert features.help_panel == FeatureState(True, False)
    assert features.status_bar == FeatureState(True, True)
    assert features.remote_control == FeatureState(True, False)


def test_defaults_are_independent_instances():
    a = Features()
    b = Features()
    a.disable(FeatureFlags.STATUS_BAR)
    assert b.is_active(FeatureFlags.STATUS_BAR)
    assert not a.is_enabled(FeatureFlags.STATUS_BAR)


@pytest.mark.parametrize("flag", list(FeatureFlags))
def test_set_and_get_state(flag):
    features = Features()
    features.set_state(flag, FeatureState(False, False))
    assert features.get_state(flag) == FeatureState(False, False)
    features.set_state(flag, FeatureState(True, True))
    assert features.is_active(flag)


def test_get_state_returns_copy():
    features = Features()
    state = features.get_state(FeatureFlags.PREVIEW_PANEL)
    state.disable()
    assert features.is_active(FeatureFlags.PREVIEW_PANEL)


def test_set_state_stores_copy():
    features = Features()
    state = FeatureState(True, True)
    features.set_state(FeatureFlags.HELP_PANEL, state)
    state.hide()
    assert features.is_visible(FeatureFlags.HELP_PANEL)


def test_toggle_enabled_hides_when_disabling():
    features = Features()
    features.toggle_enabled(FeatureFlags.PREVIEW_PANEL)
    assert features.get_state(FeatureFlags.PREVIEW_PANEL) == FeatureState(False, False)
    features.toggle_enabled(FeatureFlags.PREVIEW_PANEL)
    assert features.get_state(FeatureFlags.PREVIEW_PANEL) == FeatureState(True, False)


def test_toggle_visible():
    features = Features()
    features.toggle_visible(FeatureFlags.REMOTE_CONTROL)
    assert features.is_active(FeatureFlags.REMOTE_CONTROL)
    features.toggle_visible(FeatureFlags.REMOTE_CONTROL)
    assert not features.is_visible(FeatureFlags.REMOTE_CONTROL)


def test_toggle_visible_has_no_effect_when_disabled():
    features = Features()
    features.disable(FeatureFlags.HELP_PANEL)
    features.toggle_visible(FeatureFlags.HELP_PANEL)
    assert not features.is_visible(FeatureFlags.HELP_PANEL)


def test_show_has_no_effect_when_disabled():
    features = Features()
    features.disable(FeatureFlags.STATUS_BAR)
    features.show(FeatureFlags.STATUS_BAR)
    assert features.get_state(FeatureFlags.STATUS_BAR) == FeatureState(False, False)


def test_operations_touch_only_their_flag():
    features = Features()
    features.disable(FeatureFlags.PREVIEW_PANEL)
    assert features.help_panel == FeatureState(True, False)
    assert features.status_bar == FeatureState(True, True)
    assert features.remote_control == FeatureState(True, False)


def test_equality():
    a = Features()
    b = Features()
    assert a == b
    b.hide(FeatureFlags.STATUS_BAR)
    assert not a == b