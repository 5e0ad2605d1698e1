"""Application ports - Interfaces for external adapters."""

from .domain_config_source import DomainConfigSource
from .expiration_metrics import ExpirationMetrics

__all__ = [
    "DomainConfigSource",
    "ExpirationMetrics",
]
