"""VPSie SDK exceptions.

All exceptions inherit from VpsieError for easy catching.
"""

from __future__ import annotations

from typing import Any


class VpsieError(Exception):
    """Base exception for all VPSie SDK errors."""

    def __init__(self, message: str, *, response: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    @property
    def status_code(self) -> int | None:
        """HTTP status code of the failed response, if any."""
        return getattr(self.response, "status_code", None)


class AuthenticationError(VpsieError):
    """Invalid or missing API token.

    Check that VPSIE_API_KEY is set or pass api_key to VpsieClient.
    """


class RateLimitError(VpsieError):
    """Rate limit exceeded.

    Check retry_after for when to retry.
    """

    def __init__(
        self, message: str, *, retry_after: int | None = None, response: Any = None
    ) -> None:
        super().__init__(message, response=response)
        self.retry_after = retry_after


class ValidationError(VpsieError):
    """Request rejected by server-side validation.

    Check errors for detailed validation failures.
    """

    def __init__(
        self, message: str, *, errors: list[dict[str, Any]] | None = None, response: Any = None
    ) -> None:
        super().__init__(message, response=response)
        self.errors = errors or []


class NotFoundError(VpsieError):
    """Resource not found.

    The requested cluster, snapshot, or VM does not exist.
    """


class ConnectionError(VpsieError):
    """Failed to connect to the VPSie API.

    Check network connectivity and base_url configuration.
    """


class TimeoutError(VpsieError):
    """Request timed out.

    Consider increasing the timeout.
    """


class ServerError(VpsieError):
    """The API answered with a 5xx status."""


class APIError(VpsieError):
    """The API answered 2xx but flagged the response envelope as an error."""
