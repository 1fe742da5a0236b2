"""Pydantic models for the Auth0 Management SDK."""

from auth0_mgmt.models.action import (
    Action,
    ActionsPage,
    ActionsServiceStatus,
    ActionStatus,
    ActionTestResult,
)
from auth0_mgmt.models.binding import (
    Binding,
    BindingReference,
    BindingReferenceType,
    BindingsPage,
    BindingUpdate,
)
from auth0_mgmt.models.common import Auth0Model, Page
from auth0_mgmt.models.execution import Execution, ExecutionResult
from auth0_mgmt.models.trigger import CompatibleTrigger, Trigger, Triggers
from auth0_mgmt.models.version import (
    ActionDependency,
    ActionSecret,
    ActionSummary,
    Version,
    VersionError,
    VersionsPage,
)

__all__ = [
    # Common
    "Auth0Model",
    "Page",
    # Action
    "Action",
    "ActionStatus",
    "ActionsPage",
    "ActionTestResult",
    "ActionsServiceStatus",
    "ActionDependency",
    "ActionSecret",
    # Version
    "Version",
    "VersionError",
    "VersionsPage",
    "ActionSummary",
    # Trigger
    "Trigger",
    "Triggers",
    "CompatibleTrigger",
    # Binding
    "Binding",
    "BindingReference",
    "BindingReferenceType",
    "BindingUpdate",
    "BindingsPage",
    # Execution
    "Execution",
    "ExecutionResult",
]
