"""Use case for publishing days-to-expire metrics."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from ...domain.entities import DomainConfig
from ..ports import ExpirationMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateResult:
    """Result of a metrics update."""

    updated: int
    expired: int
    computed_at: datetime


class UpdateDomainMetrics:
    """
    Use case for computing days until expiration and publishing them.

    Writes one gauge value per configured domain. Entries sharing a name
    write the same series, so the last one in config order wins.
    """

    def __init__(self, config: DomainConfig, metrics: ExpirationMetrics) -> None:
        """
        Initialize the use case.

        Args:
            config: Validated domain list.
            metrics: Adapter for the metrics registry.
        """
        self._config = config
        self._metrics = metrics

    def execute(self, now: datetime | None = None) -> UpdateResult:
        """
        Execute the metrics update.

        Args:
            now: Reference time, defaults to the current time.

        Returns:
            UpdateResult with counts of written and expired entries.
        """
        if now is None:
            now = datetime.now(UTC)

        expired = 0
        for entry in self._config:
            days = entry.days_to_expire(now)
            if entry.is_expired(now):
                expired += 1
                logger.warning("Domain %s has expired (expires %s)", entry.name, entry.expires)
            logger.debug("Domain %s expires in %d days", entry.name, days)
            self._metrics.set_days_to_expire(entry.name, days)

        logger.info("Updated metrics for %d domains (%d expired)", len(self._config), expired)

        return UpdateResult(
            updated=len(self._config),
            expired=expired,
            computed_at=now,
        )
