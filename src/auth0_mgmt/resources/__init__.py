"""API resource modules."""

from auth0_mgmt.resources.actions import Actions, AsyncActions

__all__ = [
    "Actions",
    "AsyncActions",
]
