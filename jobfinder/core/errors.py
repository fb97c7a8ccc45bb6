"""
Error taxonomy shared by the scraper, the runner and the HTTP layer.

Callers branch on the exception type, never on the message text.
"""

from typing import Any, Optional


class JobFinderError(Exception):
    """Base class for all errors raised by jobfinder."""


class InvalidParameter(JobFinderError):
    """
    Bad caller input. Never retried; always a client-facing validation failure.
    """

    def __init__(self, name: str, value: Any, message: Optional[str] = None):
        self.name = name
        self.value = value
        super().__init__(message or f"Invalid value for '{name}': {value!r}")


class InvalidLocation(InvalidParameter):
    """Location that normalizes to an empty slug."""

    def __init__(self, value: Any):
        super().__init__(
            "location", value, f"Location {value!r} does not produce a usable slug"
        )


class FetchError(JobFinderError):
    """Base class for failures while retrieving a page."""

    transient = True

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class FetchTimeout(FetchError):
    def __init__(self, url: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(url, f"Timed out after {timeout_ms}ms fetching {url}")


class FetchNetworkError(FetchError):
    def __init__(self, url: str, reason: str):
        self.reason = reason
        super().__init__(url, f"Network error fetching {url}: {reason}")


class FetchHttpError(FetchError):
    def __init__(self, url: str, status: int):
        self.status = status
        super().__init__(url, f"HTTP {status} fetching {url}")

    @property
    def transient(self) -> bool:  # type: ignore[override]
        return self.status == 429 or self.status >= 500


class JobNotFound(JobFinderError):
    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(f"Job with ID '{job_id}' not found")
