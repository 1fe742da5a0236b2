"""Tests for executing action requests against a mocked API."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import respx

from auth0_mgmt.client import ManagementClient
from auth0_mgmt.exceptions import ConflictError, DeserializationError, NotFoundError
from auth0_mgmt.models import Action, ActionsPage, BindingUpdate, Triggers, Version

ACTION_ID = "910b1053-577f-4d81-a8c8-020e7319a38a"


class TestActionsExecute:
    """Test decoded results of executed requests."""

    def test_create_sends_body_and_token(
        self,
        client: ManagementClient,
        mock_api: respx.MockRouter,
        sample_action: dict[str, Any],
        api_token: str,
    ) -> None:
        route = mock_api.post("/api/v2/actions/actions").mock(
            return_value=httpx.Response(201, json=sample_action)
        )

        action = client.actions.create(
            Action(name="add-claims", code=sample_action["code"], runtime="node18")
        ).execute()

        assert route.called
        sent = route.calls.last.request
        assert sent.headers["Authorization"] == f"Bearer {api_token}"
        assert sent.headers["Content-Type"] == "application/json"
        assert json.loads(sent.content) == {
            "name": "add-claims",
            "code": sample_action["code"],
            "runtime": "node18",
        }
        assert isinstance(action, Action)
        assert action.id == ACTION_ID
        assert action.supported_triggers[0].id == "post-login"
        assert action.dependencies[0].name == "lodash"
        assert action.secrets[0].value is None
        assert action.status == "built"

    def test_get(
        self,
        client: ManagementClient,
        mock_api: respx.MockRouter,
        sample_action: dict[str, Any],
    ) -> None:
        mock_api.get(f"/api/v2/actions/actions/{ACTION_ID}").mock(
            return_value=httpx.Response(200, json=sample_action)
        )

        action = client.actions.get(ACTION_ID).execute()

        assert action.name == "add-claims"
        assert action.all_changes_deployed is False

    def test_list(
        self,
        client: ManagementClient,
        mock_api: respx.MockRouter,
        sample_action: dict[str, Any],
    ) -> None:
        route = mock_api.get("/api/v2/actions/actions").mock(
            return_value=httpx.Response(
                200,
                json={"actions": [sample_action], "total": 1, "page": 0, "per_page": 50},
            )
        )

        page = client.actions.list(trigger_id="post-login").execute()

        assert route.calls.last.request.url.params["triggerId"] == "post-login"
        assert isinstance(page, ActionsPage)
        assert page.total == 1
        assert page.actions[0].id == ACTION_ID

    def test_delete_returns_none(
        self, client: ManagementClient, mock_api: respx.MockRouter
    ) -> None:
        route = mock_api.delete(f"/api/v2/actions/actions/{ACTION_ID}").mock(
            return_value=httpx.Response(204)
        )

        assert client.actions.delete(ACTION_ID).execute() is None
        assert route.calls.last.request.url.params["force"] == "false"

    def test_delete_bound_action_conflict(
        self, client: ManagementClient, mock_api: respx.MockRouter
    ) -> None:
        mock_api.delete(f"/api/v2/actions/actions/{ACTION_ID}").mock(
            return_value=httpx.Response(
                409,
                json={
                    "statusCode": 409,
                    "error": "Conflict",
                    "message": "action is bound to a trigger",
                    "errorCode": "action_bound",
                },
            )
        )

        with pytest.raises(ConflictError) as exc_info:
            client.actions.delete(ACTION_ID).execute()

        assert exc_info.value.status_code == 409
        assert exc_info.value.error_code == "action_bound"
        assert exc_info.value.message == "action is bound to a trigger"

    def test_get_triggers(
        self,
        client: ManagementClient,
        mock_api: respx.MockRouter,
        sample_triggers: dict[str, Any],
    ) -> None:
        mock_api.get("/api/v2/actions/triggers").mock(
            return_value=httpx.Response(200, json=sample_triggers)
        )

        triggers = client.actions.get_triggers().execute()

        assert isinstance(triggers, Triggers)
        assert [t.id for t in triggers.triggers] == ["post-login", "credentials-exchange"]
        assert triggers.triggers[0].compatible_triggers[0].version == "v2"

    def test_deploy(
        self,
        client: ManagementClient,
        mock_api: respx.MockRouter,
        sample_version: dict[str, Any],
    ) -> None:
        route = mock_api.post(f"/api/v2/actions/actions/{ACTION_ID}/deploy").mock(
            return_value=httpx.Response(202, json=sample_version)
        )

        version = client.actions.deploy(ACTION_ID).execute()

        sent = route.calls.last.request
        assert sent.content == b""
        assert "content-type" not in sent.headers
        assert isinstance(version, Version)
        assert version.number == 3
        assert version.action.name == "add-claims"

    def test_get_version_not_found(
        self, client: ManagementClient, mock_api: respx.MockRouter
    ) -> None:
        mock_api.get(f"/api/v2/actions/actions/{ACTION_ID}/versions/missing").mock(
            return_value=httpx.Response(
                404,
                json={"statusCode": 404, "error": "Not Found", "message": "version not found"},
            )
        )

        with pytest.raises(NotFoundError, match="version not found"):
            client.actions.get_version(ACTION_ID, "missing").execute()

    def test_update_trigger_bindings(
        self,
        client: ManagementClient,
        mock_api: respx.MockRouter,
        sample_action: dict[str, Any],
    ) -> None:
        route = mock_api.patch("/api/v2/actions/triggers/post-login/bindings").mock(
            return_value=httpx.Response(
                200,
                json={
                    "bindings": [
                        {
                            "id": "binding-1",
                            "trigger_id": "post-login",
                            "display_name": "add-claims",
                            "action": sample_action,
                        }
                    ]
                },
            )
        )

        result = client.actions.update_trigger_bindings(
            "post-login", [BindingUpdate.for_action_name("add-claims")]
        ).execute()

        assert json.loads(route.calls.last.request.content) == {
            "bindings": [{"ref": {"type": "action_name", "value": "add-claims"}}]
        }
        assert result.bindings[0].action.id == ACTION_ID

    def test_get_execution(self, client: ManagementClient, mock_api: respx.MockRouter) -> None:
        mock_api.get("/api/v2/actions/executions/exec-1").mock(
            return_value=httpx.Response(
                200,
                json={
                    "id": "exec-1",
                    "trigger_id": "post-login",
                    "status": "final",
                    "results": [
                        {
                            "action_name": "add-claims",
                            "error": None,
                            "started_at": "2024-01-01T00:00:00.000Z",
                            "ended_at": "2024-01-01T00:00:01.000Z",
                        }
                    ],
                },
            )
        )

        execution = client.actions.get_execution("exec-1").execute()

        assert execution.status == "final"
        assert execution.results[0].action_name == "add-claims"

    def test_unexpected_shape_raises_deserialization_error(
        self, client: ManagementClient, mock_api: respx.MockRouter
    ) -> None:
        mock_api.post(f"/api/v2/actions/actions/{ACTION_ID}/deploy").mock(
            return_value=httpx.Response(200, json={"number": "not-a-number"})
        )

        with pytest.raises(DeserializationError, match="Version"):
            client.actions.deploy(ACTION_ID).execute()
