"""Tests for the UpdateDomainMetrics use case."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock, call

from domain_exporter.application.use_cases import UpdateDomainMetrics
from domain_exporter.domain.entities import DomainConfig, DomainEntry
from domain_exporter.infrastructure.adapters import PrometheusExpirationMetrics


class TestUpdateDomainMetrics:
    """Tests for UpdateDomainMetrics."""

    def test_sets_value_per_domain(self, metrics: PrometheusExpirationMetrics) -> None:
        """Every configured domain gets its own series."""
        first = DomainEntry.create(name="a.example", expires="2030-01-11")
        second = DomainEntry.create(name="b.example", expires="2030-01-21")
        config = DomainConfig(domains=(first, second))
        now = first.expires_at - timedelta(days=10)

        result = UpdateDomainMetrics(config, metrics).execute(now)

        assert metrics.get_days_to_expire("a.example") == 10
        assert metrics.get_days_to_expire("b.example") == 20
        assert result.updated == 2
        assert result.expired == 0
        assert result.computed_at == now

    def test_expired_domain_reports_zero(self, metrics: PrometheusExpirationMetrics) -> None:
        """Expired domains publish 0 and are counted as expired."""
        entry = DomainEntry.create(name="old.example", expires="2020-05-01")
        config = DomainConfig(domains=(entry,))

        result = UpdateDomainMetrics(config, metrics).execute(datetime(2024, 1, 1, tzinfo=UTC))

        assert metrics.get_days_to_expire("old.example") == 0
        assert result.expired == 1

    def test_duplicate_names_last_write_wins(self, metrics: PrometheusExpirationMetrics) -> None:
        """Repeated names write the same series; the last entry wins."""
        first = DomainEntry.create(name="dup.example", expires="2030-01-11")
        second = DomainEntry.create(name="dup.example", expires="2030-01-16")
        config = DomainConfig(domains=(first, second))
        now = first.expires_at - timedelta(days=1)

        UpdateDomainMetrics(config, metrics).execute(now)

        assert metrics.get_days_to_expire("dup.example") == 6

    def test_empty_config_writes_nothing(self) -> None:
        """An empty config results in no writes."""
        port = MagicMock()

        result = UpdateDomainMetrics(DomainConfig(), port).execute()

        port.set_days_to_expire.assert_not_called()
        assert result.updated == 0

    def test_writes_through_port_in_config_order(self, example_entry: DomainEntry) -> None:
        """The use case only depends on the metrics port."""
        other = DomainEntry.create(name="other.example", expires="2030-01-12")
        port = MagicMock()
        now = example_entry.expires_at - timedelta(days=2, hours=12)

        UpdateDomainMetrics(DomainConfig(domains=(example_entry, other)), port).execute(now)

        assert port.set_days_to_expire.call_args_list == [
            call("example.com", 3),
            call("other.example", 4),
        ]

    def test_rerun_recomputes_values(
        self,
        example_config: DomainConfig,
        example_entry: DomainEntry,
        metrics: PrometheusExpirationMetrics,
    ) -> None:
        """Running again with a later time lowers the published value."""
        use_case = UpdateDomainMetrics(example_config, metrics)

        use_case.execute(example_entry.expires_at - timedelta(days=5))
        assert metrics.get_days_to_expire("example.com") == 5

        use_case.execute(example_entry.expires_at - timedelta(days=2))
        assert metrics.get_days_to_expire("example.com") == 2
