"""Domain entry entity representing a tracked domain name."""

import math
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self

from ..exceptions import DateFormatError

EXPIRES_FORMAT = "%Y-%m-%d"

_EXPIRES_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True, slots=True)
class DomainEntry:
    """A domain name and the date it expires."""

    name: str
    expires: str
    expires_at: datetime

    def days_to_expire(self, now: datetime | None = None) -> int:
        """
        Whole days left until expiration, rounded up.

        Already expired domains report 0, never a negative value.

        Args:
            now: Reference time, defaults to the current time. Naive values
                are taken as local time.

        Returns:
            Non-negative number of days.
        """
        if now is None:
            now = datetime.now(UTC)
        elif now.tzinfo is None:
            now = now.astimezone()

        hours = (self.expires_at - now).total_seconds() / 3600
        return max(0, math.ceil(hours / 24))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the expiration time has passed."""
        return self.days_to_expire(now) == 0

    @classmethod
    def create(cls, *, name: str, expires: str) -> Self:
        """
        Factory method to create a DomainEntry from raw config values.

        The date is resolved to midnight in the local time zone.

        Raises:
            DateFormatError: If expires is not a valid YYYY-MM-DD date.
        """
        if not _EXPIRES_PATTERN.fullmatch(expires):
            raise DateFormatError(name, expires)
        try:
            parsed = datetime.strptime(expires, EXPIRES_FORMAT)  # noqa: DTZ007
        except ValueError as e:
            raise DateFormatError(name, expires) from e

        return cls(name=name, expires=expires, expires_at=parsed.astimezone())
