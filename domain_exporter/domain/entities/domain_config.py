"""Domain config entity - the ordered list of tracked domains."""

from collections.abc import Iterator
from dataclasses import dataclass

from .domain_entry import DomainEntry


@dataclass(frozen=True, slots=True)
class DomainConfig:
    """Immutable, ordered collection of domain entries."""

    domains: tuple[DomainEntry, ...] = ()

    def __iter__(self) -> Iterator[DomainEntry]:
        return iter(self.domains)

    def __len__(self) -> int:
        return len(self.domains)

    @property
    def names(self) -> list[str]:
        """Domain names in config order (duplicates included)."""
        return [entry.name for entry in self.domains]
