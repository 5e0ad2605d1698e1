"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class DateFormatError(DomainError):
    """Raised when a domain's expiration date is not in YYYY-MM-DD form."""

    def __init__(self, domain: str, value: str) -> None:
        self.domain = domain
        self.value = value
        super().__init__(
            f"invalid expiration date for domain {domain}: {value!r} (expected YYYY-MM-DD)"
        )
