"""Prometheus adapter for expiration metrics."""

from prometheus_client import CollectorRegistry, Gauge

METRIC_NAME = "domain_days_to_expire"
METRIC_HELP = "Days until the domain expires"


class PrometheusExpirationMetrics:
    """Writes days-to-expire values into a Prometheus gauge."""

    def __init__(self, registry: CollectorRegistry) -> None:
        """Register the gauge on the given registry."""
        self._registry = registry
        self._gauge = Gauge(
            METRIC_NAME,
            METRIC_HELP,
            ["domain"],
            registry=registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Registry the gauge is registered on."""
        return self._registry

    def set_days_to_expire(self, domain: str, days: int) -> None:
        """Set the gauge value for a domain."""
        self._gauge.labels(domain=domain).set(days)

    def get_days_to_expire(self, domain: str) -> float | None:
        """
        Read back the current value for a domain, if one was set.

        Inspection helper for tests and debugging; scrapes go through the registry.
        """
        return self._registry.get_sample_value(METRIC_NAME, {"domain": domain})


def create_metrics() -> PrometheusExpirationMetrics:
    """Build a fresh registry with the expiration gauge registered on it."""
    return PrometheusExpirationMetrics(CollectorRegistry())
