"""Argument validation helpers."""

from __future__ import annotations

from typing import Any

from auth0_mgmt.exceptions import InvalidArgumentError


def assert_not_none(value: Any, name: str) -> None:
    """Raise InvalidArgumentError if a required argument is None.

    Args:
        value: Argument value to check.
        name: Human readable argument name used in the error message.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise InvalidArgumentError(f"'{name}' cannot be null!", argument=name)
