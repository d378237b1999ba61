"""Exception hierarchy for the sheets client."""

from typing import Any, Optional


class SheetsApiError(Exception):
    """Base exception."""


class ConfigurationError(SheetsApiError, ValueError):
    """Missing endpoint settings or an empty action name."""


class TransportError(SheetsApiError):
    """Network failure, non-2xx status or an undecodable body.

    Transient: the executor retries these until its attempt budget runs out.
    """

    def __init__(self, message: str, status: Optional[int] = None, attempts: int = 1):
        super().__init__(message)
        self.status = status
        self.attempts = attempts


class ApplicationError(SheetsApiError):
    """The endpoint answered with ``success: false``. Never retried."""

    def __init__(self, message: str, response: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.response = response
