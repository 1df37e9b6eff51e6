"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from rollkit.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_default_max_explosions(self, monkeypatch):
        """Default explosion cap should be 100."""
        monkeypatch.delenv("ROLLKIT_MAX_EXPLOSIONS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.max_explosions == 100

    def test_default_seed_is_none(self, monkeypatch):
        """Rolls should use system entropy by default."""
        monkeypatch.delenv("ROLLKIT_SEED", raising=False)
        settings = Settings(_env_file=None)
        assert settings.seed is None

    def test_default_debug_is_false(self, monkeypatch):
        """Debug mode should be off by default."""
        monkeypatch.delenv("ROLLKIT_DEBUG", raising=False)
        settings = Settings(_env_file=None)
        assert settings.debug is False


class TestSettingsFromEnvironment:
    """Tests for environment overrides."""

    def test_env_overrides(self, monkeypatch):
        """ROLLKIT_* variables override defaults."""
        monkeypatch.setenv("ROLLKIT_MAX_EXPLOSIONS", "10")
        monkeypatch.setenv("ROLLKIT_SEED", "42")
        monkeypatch.setenv("ROLLKIT_DEBUG", "true")
        settings = Settings(_env_file=None)
        assert settings.max_explosions == 10
        assert settings.seed == 42
        assert settings.debug is True

    def test_case_insensitive(self, monkeypatch):
        """Variable names are case insensitive."""
        monkeypatch.setenv("rollkit_seed", "7")
        settings = Settings(_env_file=None)
        assert settings.seed == 7

    def test_negative_cap_rejected(self, monkeypatch):
        """A negative explosion cap is invalid."""
        monkeypatch.setenv("ROLLKIT_MAX_EXPLOSIONS", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_cached():
    """get_settings returns the same instance."""
    assert get_settings() is get_settings()
