"""Tests for configuration settings."""

import pytest

from okta_client import __version__
from okta_client.config import LoggingConfig, Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_settings_defaults(self, monkeypatch):
        """Test default values are correct."""
        for name in ("OKTA_API_TOKEN", "OKTA_BASE_URL", "OKTA_DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.okta_api_token == ""
        assert settings.okta_base_url == ""
        assert settings.okta_debug is False
        assert settings.user_agent == f"okta-client-python/{__version__}"
        assert settings.request_timeout == 30.0
        assert settings.log_level == "INFO"

    def test_settings_from_env(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("OKTA_API_TOKEN", "00abc")
        monkeypatch.setenv("OKTA_BASE_URL", "https://acme.okta.com/api/v1/")
        monkeypatch.setenv("OKTA_DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.okta_api_token == "00abc"
        assert settings.okta_base_url == "https://acme.okta.com/api/v1/"
        assert settings.okta_debug is True
        assert settings.log_level == "DEBUG"

    def test_settings_log_level_validation(self, monkeypatch):
        """Test that invalid log level is rejected."""
        monkeypatch.setenv("LOG_LEVEL", "INVALID")

        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_settings_timeout_must_be_positive(self, monkeypatch):
        """Test that a non-positive request timeout is rejected."""
        monkeypatch.setenv("REQUEST_TIMEOUT", "0")

        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_settings_case_insensitive(self, monkeypatch):
        """Test that env var names are case-insensitive."""
        monkeypatch.setenv("okta_api_token", "lower_token")

        settings = Settings(_env_file=None)

        assert settings.okta_api_token == "lower_token"

    def test_logging_defaults(self):
        """Test nested logging configuration defaults."""
        config = LoggingConfig()

        assert config.log_file is None
        assert config.rotation == "10 MB"
        assert config.retention == "7 days"
        assert config.serialize is False


class TestGetSettings:
    """Tests for get_settings function."""

    def test_get_settings_returns_settings(self):
        """Test that get_settings returns a Settings instance."""
        get_settings.cache_clear()

        settings = get_settings()

        assert isinstance(settings, Settings)

    def test_get_settings_cached(self):
        """Test that get_settings returns cached instance."""
        get_settings.cache_clear()

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
