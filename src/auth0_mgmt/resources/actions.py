"""Action resource operations.

Each method validates its arguments and returns an unexecuted request. Call
``execute()`` on the result to send it.
"""

from __future__ import annotations

from typing import Any

from auth0_mgmt._request import AsyncRequest, Request
from auth0_mgmt._validation import assert_not_none
from auth0_mgmt.models.action import Action, ActionsPage, ActionsServiceStatus, ActionTestResult
from auth0_mgmt.models.binding import BindingsPage, BindingUpdate
from auth0_mgmt.models.execution import Execution
from auth0_mgmt.models.trigger import Triggers
from auth0_mgmt.models.version import Version, VersionsPage
from auth0_mgmt.resources._base import AsyncResource, SyncResource

ACTIONS_BASE_PATH = "api/v2/actions"
ACTIONS_PATH = "actions"
TRIGGERS_PATH = "triggers"
BINDINGS_PATH = "bindings"
DEPLOY_PATH = "deploy"
VERSIONS_PATH = "versions"
EXECUTIONS_PATH = "executions"
TEST_PATH = "test"
STATUS_PATH = "status"


def _bindings_body(bindings: list[BindingUpdate]) -> dict[str, Any]:
    return {"bindings": [b.to_request_body() for b in bindings]}


class Actions(SyncResource):
    """Action operations."""

    base_path = ACTIONS_BASE_PATH

    def create(self, action: Action) -> Request[Action]:
        """Create an action.

        Requires a token with ``create:actions`` scope.

        Args:
            action: The action to create

        Returns:
            Request yielding the created Action
        """
        assert_not_none(action, "action")
        return self._request("POST", self._url(ACTIONS_PATH), Action, body=action)

    def get(self, action_id: str) -> Request[Action]:
        """Get an action.

        Requires a token with ``read:actions`` scope.

        Args:
            action_id: ID of the action to retrieve

        Returns:
            Request yielding the Action
        """
        assert_not_none(action_id, "action ID")
        return self._request("GET", self._url(ACTIONS_PATH, action_id), Action)

    def list(
        self,
        *,
        trigger_id: str | None = None,
        action_name: str | None = None,
        deployed: bool | None = None,
        installed: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Request[ActionsPage]:
        """List actions, optionally filtered.

        Args:
            trigger_id: Only actions supporting this trigger
            action_name: Only the action with this name
            deployed: Only deployed (or undeployed) actions
            installed: Only actions installed from the marketplace
            page: Zero-based page index
            per_page: Page size

        Returns:
            Request yielding an ActionsPage
        """
        url = self._url(
            ACTIONS_PATH,
            params={
                "triggerId": trigger_id,
                "actionName": action_name,
                "deployed": deployed,
                "installed": installed,
                "page": page,
                "per_page": per_page,
            },
        )
        return self._request("GET", url, ActionsPage)

    def delete(self, action_id: str, force: bool = False) -> Request[None]:
        """Delete an action and all of its versions.

        The action must be unbound from all triggers first unless ``force``
        is set. Requires a token with ``delete:actions`` scope.

        Args:
            action_id: ID of the action to delete
            force: Delete even if the action is still bound to triggers

        Returns:
            Request with no result
        """
        assert_not_none(action_id, "action ID")
        url = self._url(ACTIONS_PATH, action_id, params={"force": force})
        return self._request("DELETE", url)

    def get_triggers(self) -> Request[Triggers]:
        """Get the set of triggers currently available.

        Returns:
            Request yielding Triggers
        """
        return self._request("GET", self._url(TRIGGERS_PATH), Triggers)

    def update(self, action_id: str, action: Action) -> Request[Action]:
        """Update an existing action.

        Changes do not affect live flows until the action is deployed.
        Requires a token with ``update:actions`` scope.

        Args:
            action_id: ID of the action to update
            action: Fields to change

        Returns:
            Request yielding the updated Action
        """
        assert_not_none(action_id, "action ID")
        assert_not_none(action, "action")
        return self._request("PATCH", self._url(ACTIONS_PATH, action_id), Action, body=action)

    def deploy(self, action_id: str) -> Request[Version]:
        """Deploy an action, creating a new immutable version.

        If the action is bound to a trigger the new version starts executing
        immediately. Requires a token with ``create:actions`` scope.

        Args:
            action_id: ID of the action to deploy

        Returns:
            Request yielding the new Version
        """
        assert_not_none(action_id, "action ID")
        url = self._url(ACTIONS_PATH, action_id, DEPLOY_PATH)
        return self._request("POST", url, Version)

    def get_version(self, action_id: str, version_id: str) -> Request[Version]:
        """Get a specific version of an action.

        Args:
            action_id: ID of the action
            version_id: ID of the version

        Returns:
            Request yielding the Version
        """
        assert_not_none(action_id, "action ID")
        assert_not_none(version_id, "action version ID")
        url = self._url(ACTIONS_PATH, action_id, VERSIONS_PATH, version_id)
        return self._request("GET", url, Version)

    def list_versions(
        self,
        action_id: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Request[VersionsPage]:
        """List the versions of an action, newest first.

        Args:
            action_id: ID of the action
            page: Zero-based page index
            per_page: Page size

        Returns:
            Request yielding a VersionsPage
        """
        assert_not_none(action_id, "action ID")
        url = self._url(
            ACTIONS_PATH,
            action_id,
            VERSIONS_PATH,
            params={"page": page, "per_page": per_page},
        )
        return self._request("GET", url, VersionsPage)

    def rollback_version(self, action_id: str, version_id: str) -> Request[Version]:
        """Roll an action back to a previous version.

        A new version is created from the given one and deployed.

        Args:
            action_id: ID of the action
            version_id: ID of the version to roll back to

        Returns:
            Request yielding the new Version
        """
        assert_not_none(action_id, "action ID")
        assert_not_none(version_id, "action version ID")
        url = self._url(ACTIONS_PATH, action_id, VERSIONS_PATH, version_id, DEPLOY_PATH)
        return self._request("POST", url, Version)

    def test(self, action_id: str, payload: dict[str, Any]) -> Request[ActionTestResult]:
        """Run an action against a test payload.

        Args:
            action_id: ID of the action
            payload: Event payload passed to the action

        Returns:
            Request yielding an ActionTestResult
        """
        assert_not_none(action_id, "action ID")
        assert_not_none(payload, "payload")
        url = self._url(ACTIONS_PATH, action_id, TEST_PATH)
        return self._request("POST", url, ActionTestResult, body={"payload": payload})

    def get_trigger_bindings(
        self,
        trigger_id: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Request[BindingsPage]:
        """List the actions bound to a trigger, in execution order.

        Args:
            trigger_id: ID of the trigger (e.g., "post-login")
            page: Zero-based page index
            per_page: Page size

        Returns:
            Request yielding a BindingsPage
        """
        assert_not_none(trigger_id, "trigger ID")
        url = self._url(
            TRIGGERS_PATH,
            trigger_id,
            BINDINGS_PATH,
            params={"page": page, "per_page": per_page},
        )
        return self._request("GET", url, BindingsPage)

    def update_trigger_bindings(
        self, trigger_id: str, bindings: list[BindingUpdate]
    ) -> Request[BindingsPage]:
        """Replace the actions bound to a trigger.

        The order of ``bindings`` is the execution order. An empty list
        unbinds every action from the trigger.

        Args:
            trigger_id: ID of the trigger
            bindings: New bindings

        Returns:
            Request yielding the resulting BindingsPage
        """
        assert_not_none(trigger_id, "trigger ID")
        assert_not_none(bindings, "bindings")
        url = self._url(TRIGGERS_PATH, trigger_id, BINDINGS_PATH)
        return self._request("PATCH", url, BindingsPage, body=_bindings_body(bindings))

    def get_execution(self, execution_id: str) -> Request[Execution]:
        """Get the record of an action execution.

        Args:
            execution_id: ID of the execution

        Returns:
            Request yielding the Execution
        """
        assert_not_none(execution_id, "execution ID")
        return self._request("GET", self._url(EXECUTIONS_PATH, execution_id), Execution)

    def get_status(self) -> Request[ActionsServiceStatus]:
        """Get the status of the actions service.

        Returns:
            Request yielding an ActionsServiceStatus
        """
        return self._request("GET", self._url(STATUS_PATH), ActionsServiceStatus)


class AsyncActions(AsyncResource):
    """Async action operations."""

    base_path = ACTIONS_BASE_PATH

    def create(self, action: Action) -> AsyncRequest[Action]:
        """Create an action."""
        assert_not_none(action, "action")
        return self._request("POST", self._url(ACTIONS_PATH), Action, body=action)

    def get(self, action_id: str) -> AsyncRequest[Action]:
        """Get an action."""
        assert_not_none(action_id, "action ID")
        return self._request("GET", self._url(ACTIONS_PATH, action_id), Action)

    def list(
        self,
        *,
        trigger_id: str | None = None,
        action_name: str | None = None,
        deployed: bool | None = None,
        installed: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> AsyncRequest[ActionsPage]:
        """List actions, optionally filtered."""
        url = self._url(
            ACTIONS_PATH,
            params={
                "triggerId": trigger_id,
                "actionName": action_name,
                "deployed": deployed,
                "installed": installed,
                "page": page,
                "per_page": per_page,
            },
        )
        return self._request("GET", url, ActionsPage)

    def delete(self, action_id: str, force: bool = False) -> AsyncRequest[None]:
        """Delete an action and all of its versions."""
        assert_not_none(action_id, "action ID")
        url = self._url(ACTIONS_PATH, action_id, params={"force": force})
        return self._request("DELETE", url)

    def get_triggers(self) -> AsyncRequest[Triggers]:
        """Get the set of triggers currently available."""
        return self._request("GET", self._url(TRIGGERS_PATH), Triggers)

    def update(self, action_id: str, action: Action) -> AsyncRequest[Action]:
        """Update an existing action."""
        assert_not_none(action_id, "action ID")
        assert_not_none(action, "action")
        return self._request("PATCH", self._url(ACTIONS_PATH, action_id), Action, body=action)

    def deploy(self, action_id: str) -> AsyncRequest[Version]:
        """Deploy an action, creating a new immutable version."""
        assert_not_none(action_id, "action ID")
        url = self._url(ACTIONS_PATH, action_id, DEPLOY_PATH)
        return self._request("POST", url, Version)

    def get_version(self, action_id: str, version_id: str) -> AsyncRequest[Version]:
        """Get a specific version of an action."""
        assert_not_none(action_id, "action ID")
        assert_not_none(version_id, "action version ID")
        url = self._url(ACTIONS_PATH, action_id, VERSIONS_PATH, version_id)
        return self._request("GET", url, Version)

    def list_versions(
        self,
        action_id: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> AsyncRequest[VersionsPage]:
        """List the versions of an action."""
        assert_not_none(action_id, "action ID")
        url = self._url(
            ACTIONS_PATH,
            action_id,
            VERSIONS_PATH,
            params={"page": page, "per_page": per_page},
        )
        return self._request("GET", url, VersionsPage)

    def rollback_version(self, action_id: str, version_id: str) -> AsyncRequest[Version]:
        """Roll an action back to a previous version."""
        assert_not_none(action_id, "action ID")
        assert_not_none(version_id, "action version ID")
        url = self._url(ACTIONS_PATH, action_id, VERSIONS_PATH, version_id, DEPLOY_PATH)
        return self._request("POST", url, Version)

    def test(self, action_id: str, payload: dict[str, Any]) -> AsyncRequest[ActionTestResult]:
        """Run an action against a test payload."""
        assert_not_none(action_id, "action ID")
        assert_not_none(payload, "payload")
        url = self._url(ACTIONS_PATH, action_id, TEST_PATH)
        return self._request("POST", url, ActionTestResult, body={"payload": payload})

    def get_trigger_bindings(
        self,
        trigger_id: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> AsyncRequest[BindingsPage]:
        """List the actions bound to a trigger."""
        assert_not_none(trigger_id, "trigger ID")
        url = self._url(
            TRIGGERS_PATH,
            trigger_id,
            BINDINGS_PATH,
            params={"page": page, "per_page": per_page},
        )
        return self._request("GET", url, BindingsPage)

    def update_trigger_bindings(
        self, trigger_id: str, bindings: list[BindingUpdate]
    ) -> AsyncRequest[BindingsPage]:
        """Replace the actions bound to a trigger."""
        assert_not_none(trigger_id, "trigger ID")
        assert_not_none(bindings, "bindings")
        url = self._url(TRIGGERS_PATH, trigger_id, BINDINGS_PATH)
        return self._request("PATCH", url, BindingsPage, body=_bindings_body(bindings))

    def get_execution(self, execution_id: str) -> AsyncRequest[Execution]:
        """Get the record of an action execution."""
        assert_not_none(execution_id, "execution ID")
        return self._request("GET", self._url(EXECUTIONS_PATH, execution_id), Execution)

    def get_status(self) -> AsyncRequest[ActionsServiceStatus]:
        """Get the status of the actions service."""
        return self._request("GET", self._url(STATUS_PATH), ActionsServiceStatus)
