"""Application use cases."""

from .update_domain_metrics import UpdateDomainMetrics, UpdateResult

__all__ = [
    "UpdateDomainMetrics",
    "UpdateResult",
]
