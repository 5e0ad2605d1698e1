"""Metrics registry adapter."""

from .prometheus import METRIC_NAME, PrometheusExpirationMetrics, create_metrics

__all__ = [
    "METRIC_NAME",
    "PrometheusExpirationMetrics",
    "create_metrics",
]
