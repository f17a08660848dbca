"""Unit tests for settings toggles and runtime configuration."""
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from notepad_pro.config import DEFAULT_THEME, NotepadConfig, load_config
from notepad_pro.errors import UnknownRouteError, UnknownSettingError
from notepad_pro.router import Route
from notepad_pro.settings import KEY_STATUS_SUBTITLE, TOGGLES, AppSettings

TOGGLE_NAMES = [name for name, _ in TOGGLES]


class TestAppSettings:
    """Tests for the settings toggles."""

    def test_defaults_are_on(self):
        settings = AppSettings()

        assert settings.dark_mode is True
        assert settings.notifications is True
        assert settings.cloud_sync is True

    def test_toggle_returns_new_value(self):
        settings = AppSettings()

        assert settings.toggle("cloud_sync") is False
        assert settings.cloud_sync is False
        assert settings.toggle("cloud_sync") is True

    def test_toggle_leaves_others_alone(self):
        settings = AppSettings()

        settings.toggle("dark_mode")

        assert settings.notifications is True
        assert settings.cloud_sync is True

    def test_unknown_setting_fails(self):
        settings = AppSettings()

        with pytest.raises(UnknownSettingError) as exc_info:
            settings.toggle("airplane_mode")

        assert exc_info.value.name == "airplane_mode"

    def test_set_unknown_setting_fails(self):
        with pytest.raises(UnknownSettingError):
            AppSettings().set("volume", True)

    @given(st.lists(st.sampled_from(TOGGLE_NAMES), max_size=12))
    def test_toggle_parity(self, names: list[str]):
        """Property test: a toggle is on iff it was flipped an even number of times."""
        settings = AppSettings()

        for name in names:
            settings.toggle(name)

        for name in TOGGLE_NAMES:
            assert settings.get(name) is (names.count(name) % 2 == 0)

    def test_toggle_display_order(self):
        assert TOGGLES == (
            ("dark_mode", "Dark mode"),
            ("notifications", "Notifications"),
            ("cloud_sync", "Cloud Sync"),
        )
        assert KEY_STATUS_SUBTITLE == "Valid · backup recommended"


class TestNotepadConfig:
    """Tests for runtime configuration."""

    def test_defaults(self):
        config = NotepadConfig()

        assert config.log_level is None
        assert config.theme == DEFAULT_THEME
        assert config.start_route == Route.HOME

    def test_log_level_is_normalized(self):
        assert NotepadConfig(log_level=" INFO ").log_level == "info"
        assert NotepadConfig(log_level="").log_level is None

    def test_invalid_log_level_fails(self):
        with pytest.raises(ValidationError):
            NotepadConfig(log_level="verbose")

    def test_start_route_from_name(self):
        assert NotepadConfig(start_route="search").start_route == Route.SEARCH

    def test_unknown_start_route_fails(self):
        with pytest.raises(UnknownRouteError):
            NotepadConfig(start_route="profile")


class TestLoadConfig:
    """Tests for loading configuration from the environment."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NOTEPAD_PRO_LOG_LEVEL", "warning")
        monkeypatch.setenv("NOTEPAD_PRO_START_ROUTE", "editor")
        monkeypatch.setenv("NOTEPAD_PRO_THEME", "textual-dark")

        config = load_config()

        assert config.log_level == "warning"
        assert config.start_route == Route.EDITOR
        assert config.theme == "textual-dark"

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("NOTEPAD_PRO_LOG_LEVEL", "warning")

        config = load_config(log_level="debug")

        assert config.log_level == "debug"

    def test_none_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("NOTEPAD_PRO_START_ROUTE", "settings")

        config = load_config(start_route=None)

        assert config.start_route == Route.SETTINGS
