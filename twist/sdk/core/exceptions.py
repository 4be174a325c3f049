"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class TwistError(Exception):
    """Base exception for all library errors."""

    pass


class TwistRequestError(TwistError):
    """Request to the Twist API failed.

    Raised for non-2xx responses and for network failures that outlived the
    retry budget. ``http_status_code`` is ``None`` when no response was
    received at all.
    """

    def __init__(
        self,
        message: str,
        http_status_code: int | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.http_status_code = http_status_code
        self.response_data = response_data


class RateLimitError(TwistRequestError):
    """API rate limit exceeded and retries were exhausted."""

    def __init__(self, message: str, retry_after: float = 1.0, response_data: Any = None) -> None:
        super().__init__(message, http_status_code=429, response_data=response_data)
        self.retry_after = retry_after


class ValidationError(TwistError):
    """Response payload did not match the expected schema."""

    pass
