"""Base resource classes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from auth0_mgmt._request import AUTHORIZATION_HEADER, AsyncRequest, Request

if TYPE_CHECKING:
    from auth0_mgmt._http import AsyncHttpClient, HttpClient


class ManagementResource:
    """Shared URL and header handling for Management API resources.

    Subclasses set ``base_path`` to the resource prefix under the tenant URL.
    """

    base_path = ""

    def __init__(self, base_url: str, api_token: str) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_token = api_token

    def _url(self, *segments: str, params: dict[str, Any] | None = None) -> str:
        """Build an absolute URL from path segments and query parameters.

        Each segment is percent-encoded as a single path component. Query
        parameters with a None value are dropped and booleans are sent as
        ``true``/``false``.
        """
        parts = [self._base_url]
        if self.base_path:
            parts.append(self.base_path.strip("/"))
        parts.extend(quote(str(segment), safe="") for segment in segments)
        url = httpx.URL("/".join(parts))
        if params:
            query = {k: _query_value(v) for k, v in params.items() if v is not None}
            if query:
                url = url.copy_merge_params(query)
        return str(url)

    def _auth_header(self) -> str:
        return f"Bearer {self._api_token}"


class SyncResource(ManagementResource):
    """Base class for synchronous API resources."""

    def __init__(self, http: HttpClient, base_url: str, api_token: str) -> None:
        super().__init__(base_url, api_token)
        self._http = http

    def _request(
        self,
        method: str,
        url: str,
        response_type: type | None = None,
        body: Any = None,
    ) -> Request[Any]:
        request: Request[Any] = Request(method, url, response_type=response_type, http=self._http)
        request.add_header(AUTHORIZATION_HEADER, self._auth_header())
        if body is not None:
            request.set_body(body)
        return request


class AsyncResource(ManagementResource):
    """Base class for asynchronous API resources."""

    def __init__(self, http: AsyncHttpClient, base_url: str, api_token: str) -> None:
        super().__init__(base_url, api_token)
        self._http = http

    def _request(
        self,
        method: str,
        url: str,
        response_type: type | None = None,
        body: Any = None,
    ) -> AsyncRequest[Any]:
        request: AsyncRequest[Any] = AsyncRequest(
            method, url, response_type=response_type, http=self._http
        )
        request.add_header(AUTHORIZATION_HEADER, self._auth_header())
        if body is not None:
            request.set_body(body)
        return request


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
