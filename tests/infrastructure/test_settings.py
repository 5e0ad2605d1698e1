"""Tests for settings loading."""

from __future__ import annotations

import pytest

from domain_exporter.application.exceptions import ConfigurationError
from domain_exporter.infrastructure.config import Settings, load_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Defaults match the documented values."""
        settings = load_settings([])
        assert settings.config_path == "config.yaml"
        assert settings.address == ":8080"
        assert settings.log_level == "INFO"
        assert settings.refresh_schedule == ""
        assert settings.refresh_enabled is False

    def test_environment_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables replace defaults."""
        monkeypatch.setenv("CONFIG_PATH", "/etc/exporter/domains.yaml")
        monkeypatch.setenv("ADDRESS", "127.0.0.1:9222")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("REFRESH_SCHEDULE", "0 * * * *")

        settings = load_settings([])

        assert settings.config_path == "/etc/exporter/domains.yaml"
        assert settings.address == "127.0.0.1:9222"
        assert settings.log_level == "debug"
        assert settings.refresh_schedule == "0 * * * *"
        assert settings.refresh_enabled is True

    def test_flags_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Command-line flags take precedence over the environment."""
        monkeypatch.setenv("CONFIG_PATH", "from-env.yaml")
        monkeypatch.setenv("ADDRESS", ":1111")

        settings = load_settings(["--config", "from-flag.yaml", "--address", ":2222"])

        assert settings.config_path == "from-flag.yaml"
        assert settings.address == ":2222"

    def test_invalid_address(self) -> None:
        """Addresses without a port are rejected."""
        with pytest.raises(ConfigurationError, match="invalid address"):
            load_settings(["--address", "localhost"])

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            load_settings(["--log-level", "chatty"])

    def test_invalid_refresh_schedule(self) -> None:
        """Malformed cron expressions are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid refresh schedule"):
            load_settings(["--refresh-schedule", "every day"])

    def test_empty_config_path(self) -> None:
        """An empty config path is rejected."""
        with pytest.raises(ConfigurationError, match="Config path"):
            Settings(config_path="").validate()
