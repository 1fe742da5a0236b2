"""Auth0 Management API client.

Main entry point for interacting with the Management API.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from auth0_mgmt._config import ManagementConfig, base_url_for_domain
from auth0_mgmt._http import AsyncHttpClient, HttpClient
from auth0_mgmt.exceptions import Auth0Error, AuthenticationError
from auth0_mgmt.resources.actions import Actions, AsyncActions

logger = logging.getLogger(__name__)


def _resolve(
    config: ManagementConfig,
    domain: str | None,
    api_token: str | None,
    base_url: str | None,
) -> tuple[str, str]:
    """Resolve base URL and API token from arguments and config.

    Raises:
        Auth0Error: If neither a domain nor a base URL is available.
        AuthenticationError: If no API token is available.
    """
    if base_url:
        resolved_url = base_url.rstrip("/")
    elif domain:
        resolved_url = base_url_for_domain(domain)
    else:
        resolved_url = config.resolved_base_url

    if not resolved_url:
        raise Auth0Error(
            "Tenant domain is required. Set AUTH0_DOMAIN environment variable, "
            "pass domain argument, or configure in ~/.auth0-mgmt/config.toml"
        )

    token = api_token or config.api_token
    if not token:
        raise AuthenticationError(
            "API token is required. Set AUTH0_API_TOKEN environment variable, "
            "pass api_token argument, or configure in ~/.auth0-mgmt/config.toml",
            status_code=401,
        )
    return resolved_url, token


class ManagementClient:
    """Synchronous client for the Auth0 Management API.

    Example:
        ```python
        from auth0_mgmt import ManagementClient
        from auth0_mgmt.models import Action

        client = ManagementClient("my-tenant.auth0.com", api_token="...")

        action = client.actions.create(
            Action(name="my-action", code="exports.onExecutePostLogin = async () => {};")
        ).execute()
        version = client.actions.deploy(action.id).execute()
        ```

    Environment variables:
        AUTH0_DOMAIN: Tenant domain
        AUTH0_API_TOKEN: Management API token
        AUTH0_BASE_URL: Base URL, overriding the one derived from the domain
        AUTH0_TIMEOUT: Request timeout in seconds (default: 60)
        AUTH0_VERIFY_SSL: Whether to verify SSL certificates (default: true)
    """

    def __init__(
        self,
        domain: str | None = None,
        api_token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        verify_ssl: bool | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the Management API client.

        Args:
            domain: Tenant domain, e.g. "my-tenant.auth0.com".
            api_token: Management API access token.
            base_url: Full base URL. Takes precedence over domain.
            timeout: Request timeout in seconds.
            verify_ssl: Whether to verify SSL certificates.
            http_client: Preconfigured httpx client to send requests with.
        """
        config = ManagementConfig.load()

        self._base_url, self._api_token = _resolve(config, domain, api_token, base_url)
        self._timeout = timeout if timeout is not None else config.timeout
        self._verify_ssl = verify_ssl if verify_ssl is not None else config.verify_ssl

        self._http = HttpClient(
            timeout=self._timeout,
            verify_ssl=self._verify_ssl,
            client=http_client,
        )

        self.actions = Actions(self._http, self._base_url, self._api_token)
        logger.debug("Management client ready for %s", self._base_url)

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def __enter__(self) -> ManagementClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ManagementClient(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url


class AsyncManagementClient:
    """Asynchronous client for the Auth0 Management API.

    Example:
        ```python
        import asyncio
        from auth0_mgmt import AsyncManagementClient

        async def main():
            async with AsyncManagementClient("my-tenant.auth0.com", api_token="...") as client:
                triggers = await client.actions.get_triggers().execute()

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        domain: str | None = None,
        api_token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        verify_ssl: bool | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the async Management API client.

        Args:
            domain: Tenant domain, e.g. "my-tenant.auth0.com".
            api_token: Management API access token.
            base_url: Full base URL. Takes precedence over domain.
            timeout: Request timeout in seconds.
            verify_ssl: Whether to verify SSL certificates.
            http_client: Preconfigured httpx async client.
        """
        config = ManagementConfig.load()

        self._base_url, self._api_token = _resolve(config, domain, api_token, base_url)
        self._timeout = timeout if timeout is not None else config.timeout
        self._verify_ssl = verify_ssl if verify_ssl is not None else config.verify_ssl

        self._http = AsyncHttpClient(
            timeout=self._timeout,
            verify_ssl=self._verify_ssl,
            client=http_client,
        )

        self.actions = AsyncActions(self._http, self._base_url, self._api_token)

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    async def __aenter__(self) -> AsyncManagementClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncManagementClient(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url
