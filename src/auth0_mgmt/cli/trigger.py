"""Trigger CLI commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from auth0_mgmt.cli._utils import (
    get_client,
    get_json_flag,
    handle_error,
    output_json,
    output_table,
)
from auth0_mgmt.models import BindingUpdate

app = typer.Typer(help="Trigger and binding commands.")
console = Console()

BINDING_COLUMNS = [
    ("id", "Binding ID"),
    ("display_name", "Display Name"),
    ("created_at", "Created"),
]


@app.command("list")
def list_triggers(ctx: typer.Context) -> None:
    """List available triggers."""
    try:
        with get_client() as client:
            result = client.actions.get_triggers().execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                if not result.triggers:
                    console.print("[dim]No triggers found.[/dim]")
                    return

                output_table(
                    result.triggers,
                    columns=[
                        ("id", "ID"),
                        ("version", "Version"),
                        ("status", "Status"),
                        ("default_runtime", "Default Runtime"),
                    ],
                    title="Triggers",
                )

    except Exception as e:
        handle_error(e)


@app.command("bindings")
def bindings(
    ctx: typer.Context,
    trigger_id: str = typer.Argument(..., help="Trigger ID (e.g., 'post-login')"),
    page: Optional[int] = typer.Option(None, "--page", "-p", help="Zero-based page index"),
    per_page: Optional[int] = typer.Option(None, "--per-page", help="Items per page"),
) -> None:
    """List the actions bound to a trigger, in execution order."""
    try:
        with get_client() as client:
            result = client.actions.get_trigger_bindings(
                trigger_id, page=page, per_page=per_page
            ).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                if not result.bindings:
                    console.print(f"[dim]No actions bound to {trigger_id}.[/dim]")
                    return
                output_table(
                    result.bindings, columns=BINDING_COLUMNS, title=f"Bindings: {trigger_id}"
                )

    except Exception as e:
        handle_error(e)


@app.command("bind")
def bind(
    ctx: typer.Context,
    trigger_id: str = typer.Argument(..., help="Trigger ID"),
    action_names: Optional[list[str]] = typer.Argument(
        None, help="Action names in execution order; none unbinds everything"
    ),
) -> None:
    """Replace the actions bound to a trigger."""
    try:
        updates = [BindingUpdate.for_action_name(name) for name in action_names or []]
        with get_client() as client:
            result = client.actions.update_trigger_bindings(trigger_id, updates).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                console.print(
                    f"[green]Updated bindings for {trigger_id}:[/green] "
                    f"{len(result.bindings)} bound"
                )

    except Exception as e:
        handle_error(e)
