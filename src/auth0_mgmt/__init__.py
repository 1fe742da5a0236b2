"""
Auth0 Management SDK - typed request builders for the Auth0 Management API.

Actions, triggers and versions as Python objects.
"""

from auth0_mgmt._request import AsyncRequest, Request
from auth0_mgmt._version import __version__
from auth0_mgmt.client import AsyncManagementClient, ManagementClient
from auth0_mgmt.exceptions import (
    APIError,
    Auth0Error,
    AuthenticationError,
    ConflictError,
    ConnectionError,
    DeserializationError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
)
from auth0_mgmt.models import Action, Trigger, Triggers, Version

__all__ = [
    # Version
    "__version__",
    # Clients
    "ManagementClient",
    "AsyncManagementClient",
    # Requests
    "Request",
    "AsyncRequest",
    # Models
    "Action",
    "Trigger",
    "Triggers",
    "Version",
    # Exceptions
    "Auth0Error",
    "InvalidArgumentError",
    "APIError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "DeserializationError",
    "ConnectionError",
    "TimeoutError",
]
