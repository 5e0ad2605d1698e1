"""Application settings loaded from environment variables and flags."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from croniter import croniter

from ...application.exceptions import ConfigurationError
from ..adapters.api.server import parse_address

if TYPE_CHECKING:
    from collections.abc import Sequence


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    config_path: str = field(default_factory=lambda: _env_str("CONFIG_PATH", "config.yaml"))
    address: str = field(default_factory=lambda: _env_str("ADDRESS", ":8080"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # Cron expression; empty keeps the values computed at startup
    refresh_schedule: str = field(default_factory=lambda: _env_str("REFRESH_SCHEDULE"))

    @property
    def refresh_enabled(self) -> bool:
        """Check if periodic metrics refresh is configured."""
        return bool(self.refresh_schedule.strip())

    def validate(self) -> None:
        """
        Validate settings.

        Raises:
            ConfigurationError: If any setting is invalid.
        """
        if not self.config_path:
            msg = "Config path must not be empty"
            raise ConfigurationError(msg)

        parse_address(self.address)

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            msg = f"Invalid log level: {self.log_level}"
            raise ConfigurationError(msg)

        if self.refresh_enabled and not croniter.is_valid(self.refresh_schedule):
            msg = f"Invalid refresh schedule: {self.refresh_schedule!r}"
            raise ConfigurationError(msg)


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    """Build the command-line parser, with defaults taken from the environment."""
    parser = argparse.ArgumentParser(
        prog="domain-exporter",
        description="Export days until domain expiration as Prometheus metrics",
    )
    parser.add_argument("--config", default=defaults.config_path, help="Path to the configuration file")
    parser.add_argument("--address", default=defaults.address, help="Address to bind the HTTP server")
    parser.add_argument("--log-level", default=defaults.log_level, help="Logging level")
    parser.add_argument(
        "--refresh-schedule",
        default=defaults.refresh_schedule,
        help="Cron expression for recomputing metrics (default: compute once at startup)",
    )
    return parser


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    """Load and validate settings from environment and command-line flags."""
    args = build_parser(Settings()).parse_args(argv)
    settings = Settings(
        config_path=args.config,
        address=args.address,
        log_level=args.log_level,
        refresh_schedule=args.refresh_schedule,
    )
    settings.validate()
    return settings
