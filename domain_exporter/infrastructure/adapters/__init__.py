"""Infrastructure adapters - Implementations of application ports."""

from .config_file import YamlDomainConfigLoader
from .metrics import PrometheusExpirationMetrics, create_metrics

__all__ = [
    "PrometheusExpirationMetrics",
    "YamlDomainConfigLoader",
    "create_metrics",
]
