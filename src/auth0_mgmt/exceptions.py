"""Auth0 Management SDK exceptions.

All exceptions inherit from Auth0Error for easy catching.
"""

from __future__ import annotations

from typing import Any


class Auth0Error(Exception):
    """Base exception for all Auth0 Management SDK errors."""

    def __init__(self, message: str, *, response: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidArgumentError(Auth0Error, ValueError):
    """A required argument was missing.

    Raised before any request is built, so nothing was sent.
    """

    def __init__(self, message: str, *, argument: str = "") -> None:
        super().__init__(message)
        self.argument = argument


class APIError(Auth0Error):
    """The Management API answered with a non-2xx status.

    Check status_code and error_code for details.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error: str | None = None,
        error_code: str | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message, response=response)
        self.status_code = status_code
        self.error = error
        self.error_code = error_code


class AuthenticationError(APIError):
    """Invalid, expired or missing API token.

    Check that AUTH0_API_TOKEN is set or pass api_token to ManagementClient.
    """


class ForbiddenError(APIError):
    """The API token lacks the scope required for this operation."""


class NotFoundError(APIError):
    """Resource not found.

    The requested action, version, trigger or execution does not exist.
    """


class ConflictError(APIError):
    """The request conflicts with the resource state.

    Deleting an action that is still bound to a trigger without force ends here.
    """


class RateLimitError(APIError):
    """Rate limit exceeded.

    Check reset or retry_after for when to retry.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 429,
        error: str | None = None,
        error_code: str | None = None,
        limit: int | None = None,
        remaining: int | None = None,
        reset: int | None = None,
        retry_after: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=status_code,
            error=error,
            error_code=error_code,
            response=response,
        )
        self.limit = limit
        self.remaining = remaining
        self.reset = reset
        self.retry_after = retry_after


class DeserializationError(Auth0Error):
    """Response body did not match the declared result type."""


class ConnectionError(Auth0Error):
    """Failed to connect to the Auth0 Management API.

    Check network connectivity and the configured domain.
    """


class TimeoutError(Auth0Error):
    """Request timed out.

    Consider increasing the timeout.
    """
