"""Port for loading the domain list - driven/secondary port."""

from typing import Protocol

from ...domain.entities import DomainConfig


class DomainConfigSource(Protocol):
    """
    Port for loading the list of domains to track.

    This is a driven (secondary) port that defines how the application
    obtains the declarative domain list from its backing store.
    """

    def load(self) -> DomainConfig:
        """
        Load and validate the domain list.

        Returns:
            Fully validated DomainConfig.

        Raises:
            ConfigReadError: If the source cannot be read.
            ConfigParseError: If the source is not a well-formed domain list.
            DateFormatError: If an expiration date is malformed.
        """
        ...
