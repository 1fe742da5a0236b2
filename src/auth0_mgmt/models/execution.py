"""Action execution models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from auth0_mgmt.models.common import Auth0Model


class ExecutionResult(Auth0Model):
    """Outcome of one action inside an execution."""

    action_name: str | None = None
    error: dict[str, Any] | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None


class Execution(Auth0Model):
    """A record of the actions run for a trigger firing.

    Executions are retained for a limited time by the API.
    """

    id: str
    trigger_id: str | None = None
    status: str | None = None
    results: list[ExecutionResult] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
