"""Config file adapter."""

from .loader import YamlDomainConfigLoader

__all__ = ["YamlDomainConfigLoader"]
