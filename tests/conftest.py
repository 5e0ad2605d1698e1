"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from pathlib import Path

import pytest

from domain_exporter.domain.entities import DomainConfig, DomainEntry
from domain_exporter.infrastructure.adapters import PrometheusExpirationMetrics, create_metrics

ENV_VARS = ("CONFIG_PATH", "ADDRESS", "LOG_LEVEL", "REFRESH_SCHEDULE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove exporter variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def metrics() -> PrometheusExpirationMetrics:
    """Metrics adapter on a fresh registry."""
    return create_metrics()


@pytest.fixture
def noon_today() -> datetime:
    """Local noon today, far from any midnight rounding edge."""
    return datetime.combine(date.today(), time(12)).astimezone()


@pytest.fixture
def example_entry() -> DomainEntry:
    """A domain expiring on a fixed date."""
    return DomainEntry.create(name="example.com", expires="2030-01-11")


@pytest.fixture
def example_config(example_entry: DomainEntry) -> DomainConfig:
    """Config with a single domain."""
    return DomainConfig(domains=(example_entry,))


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing a config file and returning its path."""

    def _write(content: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def days_from_today() -> Callable[[int], str]:
    """Factory returning the date string for today plus N days."""

    def _days(days: int) -> str:
        return (date.today() + timedelta(days=days)).isoformat()

    return _days
