"""Typed request descriptors.

Resource methods return one of these instead of performing I/O. The
descriptor carries everything needed to send the request plus the type the
response body should be decoded into.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import pydantic

from auth0_mgmt.exceptions import Auth0Error, DeserializationError

if TYPE_CHECKING:
    from auth0_mgmt._http import AsyncHttpClient, HttpClient

T = TypeVar("T")

AUTHORIZATION_HEADER = "Authorization"


@dataclass
class BaseRequest(Generic[T]):
    """An unexecuted HTTP request whose response decodes to ``T``.

    Attributes:
        method: HTTP method.
        url: Absolute URL including the query string.
        response_type: Model the response body is validated into. None for
            requests whose response body is ignored.
        headers: Request headers.
        body: JSON-ready request body, or None to send no body.
    """

    method: str
    url: str
    response_type: type[T] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None

    def add_header(self, name: str, value: str) -> None:
        """Set a header, replacing any existing one with the same name."""
        for existing in [k for k in self.headers if k.lower() == name.lower()]:
            del self.headers[existing]
        self.headers[name] = value

    def set_body(self, body: Any) -> None:
        """Set the JSON body from a model or a plain dict."""
        if hasattr(body, "to_request_body"):
            body = body.to_request_body()
        self.body = body

    @property
    def is_void(self) -> bool:
        return self.response_type is None

    def parse_response(self, data: Any) -> T | None:
        """Decode a response payload into the declared result type.

        Raises:
            DeserializationError: If the payload does not match the type.
        """
        if self.response_type is None:
            return None
        try:
            return self.response_type.model_validate(data)  # type: ignore[attr-defined]
        except pydantic.ValidationError as e:
            raise DeserializationError(
                f"Failed to parse {self.response_type.__name__} from response: {e}"
            ) from e


@dataclass
class Request(BaseRequest[T]):
    """Request executed through a synchronous HttpClient."""

    http: HttpClient | None = field(default=None, repr=False, compare=False)

    def execute(self) -> T | None:
        """Send the request and decode the response.

        Returns:
            The decoded response, or None for void requests.
        """
        if self.http is None:
            raise Auth0Error("Request is not bound to an HTTP client")
        data = self.http.send(self)
        return self.parse_response(data)


@dataclass
class AsyncRequest(BaseRequest[T]):
    """Request executed through an AsyncHttpClient."""

    http: AsyncHttpClient | None = field(default=None, repr=False, compare=False)

    async def execute(self) -> T | None:
        """Send the request and decode the response."""
        if self.http is None:
            raise Auth0Error("Request is not bound to an HTTP client")
        data = await self.http.send(self)
        return self.parse_response(data)
