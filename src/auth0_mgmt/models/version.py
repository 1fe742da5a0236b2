"""Action version models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from auth0_mgmt.models.common import Auth0Model, Page
from auth0_mgmt.models.trigger import Trigger


class ActionSecret(Auth0Model):
    """A secret made available to the action code at runtime.

    The API never returns secret values, only names and update times.
    """

    name: str
    value: str | None = None
    updated_at: datetime | None = None


class ActionDependency(Auth0Model):
    """An npm dependency required by the action code."""

    name: str
    version: str | None = None
    registry_url: str | None = None


class VersionError(Auth0Model):
    """Build error reported for a version."""

    id: str | None = None
    msg: str | None = None
    url: str | None = None


class ActionSummary(Auth0Model):
    """Action fields embedded in a version."""

    id: str | None = None
    name: str | None = None
    supported_triggers: list[Trigger] = Field(default_factory=list)
    all_changes_deployed: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Version(Auth0Model):
    """Immutable snapshot of an action, created on every deploy."""

    id: str
    action_id: str | None = None
    code: str | None = None
    dependencies: list[ActionDependency] = Field(default_factory=list)
    deployed: bool | None = None
    runtime: str | None = None
    secrets: list[ActionSecret] = Field(default_factory=list)
    status: str | None = None
    number: int | None = None
    errors: list[VersionError] = Field(default_factory=list)
    action: ActionSummary | None = None
    built_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    supported_triggers: list[Trigger] = Field(default_factory=list)


class VersionsPage(Page):
    """A page of versions for one action."""

    versions: list[Version] = Field(default_factory=list)
