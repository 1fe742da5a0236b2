"""Trigger binding models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from auth0_mgmt.models.action import Action
from auth0_mgmt.models.common import Auth0Model, Page
from auth0_mgmt.models.version import ActionSecret


class BindingReferenceType(str, Enum):
    """How a binding update refers to its action."""

    ACTION_ID = "action_id"
    ACTION_NAME = "action_name"


class BindingReference(Auth0Model):
    """Reference to the action a binding should execute."""

    type: BindingReferenceType | str
    value: str


class Binding(Auth0Model):
    """An action bound to a trigger, in execution order."""

    id: str
    trigger_id: str | None = None
    display_name: str | None = None
    action: Action | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BindingUpdate(Auth0Model):
    """One entry of a trigger bindings update."""

    ref: BindingReference
    display_name: str | None = None
    secrets: list[ActionSecret] | None = None

    @classmethod
    def for_action_id(cls, action_id: str, display_name: str | None = None) -> BindingUpdate:
        return cls(
            ref=BindingReference(type=BindingReferenceType.ACTION_ID, value=action_id),
            display_name=display_name,
        )

    @classmethod
    def for_action_name(cls, action_name: str, display_name: str | None = None) -> BindingUpdate:
        return cls(
            ref=BindingReference(type=BindingReferenceType.ACTION_NAME, value=action_name),
            display_name=display_name,
        )


class BindingsPage(Page):
    """A page of bindings for one trigger."""

    bindings: list[Binding] = Field(default_factory=list)
