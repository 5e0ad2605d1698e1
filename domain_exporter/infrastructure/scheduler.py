"""Cron-driven metrics refresh."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from croniter import croniter

from ..application.exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..application.use_cases import UpdateDomainMetrics

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """
    Re-runs the metrics update on a cron schedule in a background thread.

    The domain list is never re-read; only the days-to-expire values are
    recomputed against the current time.
    """

    def __init__(self, updater: UpdateDomainMetrics, cron_schedule: str) -> None:
        """
        Initialize scheduler.

        Raises:
            ConfigurationError: If the cron expression is invalid.
        """
        if not croniter.is_valid(cron_schedule):
            msg = f"Invalid refresh schedule: {cron_schedule!r}"
            raise ConfigurationError(msg)

        self._updater = updater
        self._cron_schedule = cron_schedule
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def cron_schedule(self) -> str:
        """Cron expression driving the refresh."""
        return self._cron_schedule

    def next_run(self, after: datetime) -> datetime:
        """Next fire time strictly after the given time."""
        next_run = croniter(self._cron_schedule, after).get_next(datetime)

        # Handle timezone-naive datetime from croniter
        if next_run.tzinfo is None:
            next_run = next_run.replace(tzinfo=UTC)
        return next_run

    def start(self) -> None:
        """Start the refresh thread."""
        logger.info("Starting metrics refresh with cron: %s", self._cron_schedule)
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="metrics-refresh", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Signal the refresh thread to stop and wait for it."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        last = datetime.now(UTC)
        while not self._stop.is_set():
            next_run = self.next_run(last)
            sleep_seconds = (next_run - datetime.now(UTC)).total_seconds()

            if sleep_seconds > 0:
                logger.info("Next metrics refresh scheduled for %s", next_run.isoformat())
                if self._stop.wait(sleep_seconds):
                    break

            logger.info("Running scheduled metrics refresh...")
            try:
                self._updater.execute()
            except Exception:
                logger.exception("Scheduled metrics refresh failed")
            last = next_run
