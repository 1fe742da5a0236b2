"""Trigger models."""

from __future__ import annotations

from pydantic import Field

from auth0_mgmt.models.common import Auth0Model


class CompatibleTrigger(Auth0Model):
    """A trigger whose actions can also run on another trigger."""

    id: str
    version: str | None = None


class Trigger(Auth0Model):
    """An extensibility point to which actions can be bound."""

    id: str
    version: str | None = None
    status: str | None = None
    runtimes: list[str] = Field(default_factory=list)
    default_runtime: str | None = None
    compatible_triggers: list[CompatibleTrigger] = Field(default_factory=list)
    binding_policy: str | None = None


class Triggers(Auth0Model):
    """Set of triggers currently available."""

    triggers: list[Trigger] = Field(default_factory=list)
