"""Action models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field

from auth0_mgmt.models.common import Auth0Model, Page
from auth0_mgmt.models.trigger import Trigger
from auth0_mgmt.models.version import ActionDependency, ActionSecret, Version


class ActionStatus(str, Enum):
    """Build status of an action."""

    PENDING = "pending"
    BUILDING = "building"
    PACKAGED = "packaged"
    BUILT = "built"
    RETRYING = "retrying"
    FAILED = "failed"


class Action(Auth0Model):
    """An extensibility unit bound to zero or more triggers.

    Every field is optional so the same model can describe a partial update.
    Read-only fields such as ``id`` and ``status`` are populated from responses.
    """

    id: str | None = None
    name: str | None = None
    supported_triggers: list[Trigger] | None = None
    code: str | None = None
    dependencies: list[ActionDependency] | None = None
    runtime: str | None = None
    secrets: list[ActionSecret] | None = None
    deployed_version: Version | None = None
    installed_integration_id: str | None = None
    integration: dict[str, Any] | None = None
    status: ActionStatus | str | None = None
    all_changes_deployed: bool | None = None
    built_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ActionsPage(Page):
    """A page of actions."""

    actions: list[Action] = Field(default_factory=list)


class ActionTestResult(Auth0Model):
    """Result of running an action against a test payload."""

    payload: dict[str, Any] = Field(default_factory=dict)


class ActionsServiceStatus(Auth0Model):
    """Health of the actions service for the tenant."""

    status: str | None = None
