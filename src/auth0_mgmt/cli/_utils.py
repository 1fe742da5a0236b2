"""CLI utilities."""

from __future__ import annotations

import json
import logging
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from auth0_mgmt.client import ManagementClient
from auth0_mgmt.exceptions import APIError, Auth0Error

console = Console()
error_console = Console(stderr=True)


def get_client() -> ManagementClient:
    """Get a ManagementClient from environment variables and config file."""
    try:
        return ManagementClient()
    except Auth0Error as e:
        error_console.print(f"[red]Configuration error:[/red] {e}")
        error_console.print("\nSet a tenant and token, for example:")
        error_console.print("  auth0-mgmt config set domain my-tenant.auth0.com")
        error_console.print("  auth0-mgmt config set api_token <token>")
        raise typer.Exit(1) from None


def setup_logging(debug: bool) -> None:
    """Route SDK logs to stderr through rich."""
    logger = logging.getLogger("auth0_mgmt")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=error_console, show_path=False))
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def output_json(data: Any) -> None:
    """Output data as JSON."""
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json", exclude_none=True)
    elif isinstance(data, list) and data and hasattr(data[0], "model_dump"):
        data = [item.model_dump(mode="json", exclude_none=True) for item in data]

    console.print_json(json.dumps(data, default=str))


def output_table(
    data: list[Any],
    columns: list[tuple[str, str]],
    title: str | None = None,
) -> None:
    """Output data as a Rich table.

    Args:
        data: List of objects
        columns: List of (field_name, header) tuples
        title: Optional table title
    """
    table = Table(title=title, show_header=True, header_style="bold")

    for _, header in columns:
        table.add_column(header)

    for item in data:
        row = []
        for field, _ in columns:
            value = getattr(item, field, None)

            if value is None:
                value = "-"
            elif isinstance(value, bool):
                value = "Yes" if value else "No"
            elif isinstance(value, list):
                value = ", ".join(getattr(v, "id", str(v)) for v in value) or "-"
            elif hasattr(value, "isoformat"):
                value = value.strftime("%Y-%m-%d %H:%M:%S")

            row.append(str(value))

        table.add_row(*row)

    console.print(table)


def handle_error(e: Exception) -> None:
    """Handle and display an error."""
    if isinstance(e, typer.Exit):
        raise e
    if isinstance(e, APIError):
        error_console.print(f"[red]Error ({e.status_code}):[/red] {e.message}")
    elif isinstance(e, Auth0Error):
        error_console.print(f"[red]Error:[/red] {e.message}")
    else:
        error_console.print(f"[red]Error:[/red] {e}")

    raise typer.Exit(1)


def parse_pairs(values: list[str] | None, option: str) -> dict[str, str]:
    """Parse repeated key=value options."""
    pairs: dict[str, str] = {}
    for item in values or []:
        if "=" not in item:
            raise typer.BadParameter(f"Expected key=value, got {item!r}", param_hint=option)
        key, value = item.split("=", 1)
        pairs[key] = value
    return pairs


def get_json_flag(ctx: typer.Context) -> bool:
    """Get JSON output flag from context."""
    return ctx.obj.get("json", False) if ctx.obj else False
