"""Exception hierarchy for the EDF Tempo price schedule."""

from __future__ import annotations


class TempoError(Exception):
    """Base exception for all EDF Tempo errors."""


class ConfigurationError(TempoError):
    """Unresolvable time zone or incomplete price table."""


class DataError(TempoError):
    """Day colour sequence with gaps, duplicates or a missing leading day."""


class FetchError(TempoError):
    """The day colour feed could not be retrieved or read."""


class TempoConnectionError(FetchError):
    """Network-level error (timeout, DNS, connection refused)."""


class TempoResponseError(FetchError):
    """Response body is not the expected JSON shape."""


class TempoClientError(FetchError):
    """HTTP 4xx error."""

    def __init__(self, status_code: int, message: str) -> None:
        """Initialize with HTTP status code."""
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")


class TempoServerError(FetchError):
    """HTTP 5xx server error."""

    def __init__(self, status_code: int, message: str) -> None:
        """Initialize with HTTP status code."""
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")
