"""Domain entities - Objects with identity and lifecycle."""

from .domain_config import DomainConfig
from .domain_entry import DomainEntry

__all__ = [
    "DomainConfig",
    "DomainEntry",
]
