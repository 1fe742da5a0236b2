"""HTTP client infrastructure for the Auth0 Management SDK.

Handles:
- Sending request descriptors over httpx
- Error mapping
- Request logging

No retries are performed.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING, Any

import httpx

from auth0_mgmt._config import DEFAULT_TIMEOUT
from auth0_mgmt._version import __version__
from auth0_mgmt.exceptions import (
    APIError,
    AuthenticationError,
    ConflictError,
    ConnectionError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
)

if TYPE_CHECKING:
    from auth0_mgmt._request import BaseRequest

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": f"auth0-mgmt-python/{__version__}",
    "Accept": "application/json",
}

_STATUS_ERRORS: dict[int, type[APIError]] = {
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


class HttpClient:
    """Synchronous HTTP client for the Management API."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=DEFAULT_HEADERS.copy(),
            timeout=timeout,
            verify=verify_ssl,
        )

    def close(self) -> None:
        """Close the HTTP client.

        An httpx client passed in by the caller is left open.
        """
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(self, request: BaseRequest[Any]) -> Any:
        """Send a request descriptor and return the decoded JSON payload.

        Raises:
            TimeoutError: If the request timed out.
            ConnectionError: If the API could not be reached.
            APIError: If the API answered with a non-2xx status.
        """
        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.body,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Failed to connect: {e}") from e

        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return _handle_response(response)


class AsyncHttpClient:
    """Asynchronous HTTP client for the Management API."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=DEFAULT_HEADERS.copy(),
            timeout=timeout,
            verify=verify_ssl,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def send(self, request: BaseRequest[Any]) -> Any:
        """Send a request descriptor and return the decoded JSON payload."""
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.body,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Failed to connect: {e}") from e

        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return _handle_response(response)


def _handle_response(response: httpx.Response) -> Any:
    """Handle HTTP response and map errors."""
    if response.status_code == 204:
        return None

    try:
        data = response.json()
    except ValueError:
        data = None

    if response.is_success:
        return data

    message = _extract_error_message(data, response)
    error = data.get("error") if isinstance(data, dict) else None
    error_code = data.get("errorCode") if isinstance(data, dict) else None

    if response.status_code == 429:
        raise RateLimitError(
            message,
            error=error,
            error_code=error_code,
            limit=_int_header(response, "x-ratelimit-limit"),
            remaining=_int_header(response, "x-ratelimit-remaining"),
            reset=_int_header(response, "x-ratelimit-reset"),
            retry_after=_int_header(response, "Retry-After"),
            response=response,
        )

    error_class = _STATUS_ERRORS.get(response.status_code, APIError)
    if response.status_code >= 500:
        message = f"Server error: {message}"
    raise error_class(
        message,
        status_code=response.status_code,
        error=error,
        error_code=error_code,
        response=response,
    )


def _extract_error_message(data: Any, response: httpx.Response) -> str:
    """Extract error message from an Auth0 error body."""
    if isinstance(data, dict):
        if "message" in data:
            return str(data["message"])
        if "description" in data:
            return str(data["description"])
        if "error_description" in data:
            return str(data["error_description"])
        if isinstance(data.get("error"), str):
            return data["error"]

    return f"HTTP {response.status_code}: {response.reason_phrase}"


def _int_header(response: httpx.Response, name: str) -> int | None:
    value = response.headers.get(name)
    if not value:
        return None
    with contextlib.suppress(ValueError):
        return int(value)
    return None
