"""Common models shared across resources."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Auth0Model(BaseModel):
    """Base model for all Management API models."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_request_body(self) -> dict:
        """Serialize for a request body, leaving out unset and null fields."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True, by_alias=True)


class Page(Auth0Model):
    """Offset pagination metadata returned by list endpoints."""

    total: int | None = None
    page: int | None = None
    per_page: int | None = None
