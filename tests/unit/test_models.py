"""Tests for Management API models."""

from __future__ import annotations

from typing import Any

from auth0_mgmt.models import (
    Action,
    ActionStatus,
    BindingReferenceType,
    BindingUpdate,
    Version,
    VersionsPage,
)


class TestAction:
    def test_parse_full_response(self, sample_action: dict[str, Any]) -> None:
        action = Action.model_validate(sample_action)

        assert action.status == ActionStatus.BUILT.value
        assert action.created_at is not None
        assert action.created_at.year == 2024

    def test_unknown_status_kept_as_string(self, sample_action: dict[str, Any]) -> None:
        action = Action.model_validate({**sample_action, "status": "brand-new"})

        assert action.status == "brand-new"

    def test_request_body_only_has_set_fields(self) -> None:
        assert Action(name="only-name").to_request_body() == {"name": "only-name"}

    def test_parsed_action_round_trips_through_body(self, sample_action: dict[str, Any]) -> None:
        body = Action.model_validate(sample_action).to_request_body()

        assert body["id"] == sample_action["id"]
        assert body["secrets"] == [{"name": "API_KEY", "updated_at": "2024-01-01T00:00:00Z"}]


class TestVersion:
    def test_parse_with_errors(self, sample_version: dict[str, Any]) -> None:
        data = {
            **sample_version,
            "status": "failed",
            "errors": [{"id": "err-1", "msg": "SyntaxError: Unexpected token", "url": None}],
        }

        version = Version.model_validate(data)

        assert version.errors[0].msg.startswith("SyntaxError")
        assert version.supported_triggers[0].id == "post-login"

    def test_versions_page(self, sample_version: dict[str, Any]) -> None:
        page = VersionsPage.model_validate(
            {"versions": [sample_version], "total": 1, "page": 0, "per_page": 20}
        )

        assert page.per_page == 20
        assert page.versions[0].number == 3


class TestBindingUpdate:
    def test_for_action_id(self) -> None:
        update = BindingUpdate.for_action_id("abc123")

        assert update.ref.type == BindingReferenceType.ACTION_ID.value
        assert update.to_request_body() == {"ref": {"type": "action_id", "value": "abc123"}}
