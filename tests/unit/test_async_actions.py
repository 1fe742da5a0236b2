"""Tests for the async Actions resource."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import respx

from auth0_mgmt._http import AsyncHttpClient
from auth0_mgmt._request import AsyncRequest
from auth0_mgmt.client import AsyncManagementClient
from auth0_mgmt.exceptions import InvalidArgumentError, NotFoundError
from auth0_mgmt.models import Action, Version
from auth0_mgmt.resources.actions import AsyncActions

BASE = "https://tenant.test.auth0.com/api/v2/actions"


@pytest.fixture
def async_actions(base_url: str, api_token: str) -> AsyncActions:
    return AsyncActions(AsyncHttpClient(), base_url, api_token)


def test_async_requests_match_sync_paths(async_actions: AsyncActions, api_token: str) -> None:
    request = async_actions.get_version("abc123", "v1")

    assert isinstance(request, AsyncRequest)
    assert request.url == f"{BASE}/actions/abc123/versions/v1"
    assert request.headers["Authorization"] == f"Bearer {api_token}"
    assert async_actions.delete("abc123").url == f"{BASE}/actions/abc123?force=false"
    assert async_actions.get_triggers().url == f"{BASE}/triggers"


def test_async_validation_is_synchronous(async_actions: AsyncActions) -> None:
    with pytest.raises(InvalidArgumentError):
        async_actions.update("abc123", None)  # type: ignore[arg-type]


@pytest.mark.anyio
async def test_async_create_and_deploy(
    base_url: str,
    api_token: str,
    sample_action: dict[str, Any],
    sample_version: dict[str, Any],
) -> None:
    action_id = sample_action["id"]
    with respx.mock(base_url=base_url) as router:
        create_route = router.post("/api/v2/actions/actions").mock(
            return_value=httpx.Response(201, json=sample_action)
        )
        deploy_route = router.post(f"/api/v2/actions/actions/{action_id}/deploy").mock(
            return_value=httpx.Response(202, json=sample_version)
        )

        async with AsyncManagementClient(api_token=api_token, base_url=base_url) as client:
            action = await client.actions.create(Action(name="add-claims")).execute()
            version = await client.actions.deploy(action.id).execute()

    assert json.loads(create_route.calls.last.request.content) == {"name": "add-claims"}
    assert deploy_route.calls.last.request.content == b""
    assert isinstance(version, Version)
    assert version.action_id == action_id


@pytest.mark.anyio
async def test_async_not_found(base_url: str, api_token: str) -> None:
    with respx.mock(base_url=base_url) as router:
        router.get("/api/v2/actions/actions/missing").mock(
            return_value=httpx.Response(404, json={"message": "action not found"})
        )

        async with AsyncManagementClient(api_token=api_token, base_url=base_url) as client:
            with pytest.raises(NotFoundError, match="action not found"):
                await client.actions.get("missing").execute()
