"""Port for publishing expiration metrics - driven/secondary port."""

from typing import Protocol


class ExpirationMetrics(Protocol):
    """
    Port for publishing per-domain expiration values.

    This is a driven (secondary) port that defines how the application
    writes computed values into a metrics registry.
    """

    def set_days_to_expire(self, domain: str, days: int) -> None:
        """
        Set the days-to-expire value for a domain.

        Args:
            domain: Domain name used as the series label.
            days: Non-negative number of days until expiration.
        """
        ...
