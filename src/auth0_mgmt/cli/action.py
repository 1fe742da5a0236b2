"""Action CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from auth0_mgmt.cli._utils import (
    get_client,
    get_json_flag,
    handle_error,
    output_json,
    output_table,
    parse_pairs,
)
from auth0_mgmt.models import Action, ActionDependency, ActionSecret, Trigger, Version

app = typer.Typer(help="Action management commands.")
console = Console()

VERSION_COLUMNS = [
    ("id", "ID"),
    ("number", "Number"),
    ("status", "Status"),
    ("deployed", "Deployed"),
    ("created_at", "Created"),
]


def _build_action(
    name: Optional[str],
    code_file: Optional[Path],
    runtime: Optional[str],
    triggers: Optional[list[str]],
    secrets: Optional[list[str]],
    dependencies: Optional[list[str]],
) -> Action:
    """Assemble an Action from CLI options, leaving unset fields as None."""
    deps = None
    if dependencies:
        deps = []
        for dep in dependencies:
            dep_name, sep, dep_version = dep.rpartition("@")
            # a leading @ belongs to a scoped package name
            if not sep or not dep_name:
                dep_name, dep_version = dep, ""
            deps.append(ActionDependency(name=dep_name, version=dep_version or None))

    secret_pairs = parse_pairs(secrets, "--secret")

    return Action(
        name=name,
        code=code_file.read_text() if code_file else None,
        runtime=runtime,
        supported_triggers=[Trigger(id=t) for t in triggers] if triggers else None,
        secrets=[ActionSecret(name=k, value=v) for k, v in secret_pairs.items()] or None,
        dependencies=deps,
    )


def _print_version(version: Version, heading: str) -> None:
    console.print(f"[green]{heading}:[/green] {version.id}")
    if version.number is not None:
        console.print(f"  Number: {version.number}")
    console.print(f"  Status: {version.status or '-'}")


@app.command("list")
def list_actions(
    ctx: typer.Context,
    trigger_id: Optional[str] = typer.Option(None, "--trigger", "-t", help="Filter by trigger ID"),
    action_name: Optional[str] = typer.Option(None, "--name", "-n", help="Filter by action name"),
    deployed: Optional[bool] = typer.Option(
        None, "--deployed/--not-deployed", help="Filter by deployment state"
    ),
    page: Optional[int] = typer.Option(None, "--page", "-p", help="Zero-based page index"),
    per_page: Optional[int] = typer.Option(None, "--per-page", help="Items per page"),
) -> None:
    """List actions."""
    try:
        with get_client() as client:
            result = client.actions.list(
                trigger_id=trigger_id,
                action_name=action_name,
                deployed=deployed,
                page=page,
                per_page=per_page,
            ).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                if not result.actions:
                    console.print("[dim]No actions found.[/dim]")
                    return

                output_table(
                    result.actions,
                    columns=[
                        ("id", "ID"),
                        ("name", "Name"),
                        ("runtime", "Runtime"),
                        ("supported_triggers", "Triggers"),
                        ("status", "Status"),
                        ("all_changes_deployed", "Deployed"),
                    ],
                    title="Actions",
                )

    except Exception as e:
        handle_error(e)


@app.command("get")
def get(
    ctx: typer.Context,
    action_id: str = typer.Argument(..., help="Action ID"),
) -> None:
    """Show action details."""
    try:
        with get_client() as client:
            action = client.actions.get(action_id).execute()

            if get_json_flag(ctx):
                output_json(action)
            else:
                console.print(f"[bold]{action.name}[/bold] ({action.id})")
                console.print(f"  Runtime: {action.runtime or '-'}")
                console.print(f"  Status: {action.status or '-'}")
                triggers = ", ".join(t.id for t in action.supported_triggers or []) or "-"
                console.print(f"  Triggers: {triggers}")
                if action.deployed_version:
                    console.print(f"  Deployed version: {action.deployed_version.id}")
                if action.secrets:
                    console.print(f"  Secrets: {', '.join(s.name for s in action.secrets)}")
                if action.dependencies:
                    console.print("\n  [bold]Dependencies:[/bold]")
                    for dep in action.dependencies:
                        console.print(f"    {dep.name}@{dep.version or 'latest'}")

    except Exception as e:
        handle_error(e)


@app.command("create")
def create(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Action name"),
    code_file: Path = typer.Option(
        ..., "--code", "-c", help="File with the action source code", exists=True
    ),
    triggers: list[str] = typer.Option(
        ..., "--trigger", "-t", help="Supported trigger ID (repeatable)"
    ),
    runtime: Optional[str] = typer.Option(None, "--runtime", "-r", help="Runtime, e.g. node18"),
    secrets: Optional[list[str]] = typer.Option(
        None, "--secret", "-s", help="Secret in NAME=VALUE format (repeatable)"
    ),
    dependencies: Optional[list[str]] = typer.Option(
        None, "--dependency", "-d", help="npm dependency as name@version (repeatable)"
    ),
) -> None:
    """Create an action."""
    try:
        action = _build_action(name, code_file, runtime, triggers, secrets, dependencies)
        with get_client() as client:
            created = client.actions.create(action).execute()

            if get_json_flag(ctx):
                output_json(created)
            else:
                console.print(f"[green]Created action:[/green] {created.id}")
                console.print(f"  Name: {created.name}")
                console.print("[dim]Run 'auth0-mgmt action deploy' to make it live.[/dim]")

    except Exception as e:
        handle_error(e)


@app.command("update")
def update(
    ctx: typer.Context,
    action_id: str = typer.Argument(..., help="Action ID"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New action name"),
    code_file: Optional[Path] = typer.Option(
        None, "--code", "-c", help="File with the new source code", exists=True
    ),
    triggers: Optional[list[str]] = typer.Option(
        None, "--trigger", "-t", help="Supported trigger ID (repeatable)"
    ),
    runtime: Optional[str] = typer.Option(None, "--runtime", "-r", help="Runtime"),
    secrets: Optional[list[str]] = typer.Option(
        None, "--secret", "-s", help="Secret in NAME=VALUE format (repeatable)"
    ),
    dependencies: Optional[list[str]] = typer.Option(
        None, "--dependency", "-d", help="npm dependency as name@version (repeatable)"
    ),
) -> None:
    """Update an action. Changes take effect after the next deploy."""
    try:
        action = _build_action(name, code_file, runtime, triggers, secrets, dependencies)
        with get_client() as client:
            updated = client.actions.update(action_id, action).execute()

            if get_json_flag(ctx):
                output_json(updated)
            else:
                console.print(f"[green]Updated action:[/green] {updated.id}")

    except Exception as e:
        handle_error(e)


@app.command("delete")
def delete(
    action_id: str = typer.Argument(..., help="Action ID"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete even if bound to triggers"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete an action and all of its versions."""
    try:
        if not yes and not typer.confirm(f"Delete action {action_id}?", default=False):
            console.print("[dim]Aborted.[/dim]")
            raise typer.Exit(0)

        with get_client() as client:
            client.actions.delete(action_id, force=force).execute()
            console.print(f"[green]Deleted action:[/green] {action_id}")

    except Exception as e:
        handle_error(e)


@app.command("deploy")
def deploy(
    ctx: typer.Context,
    action_id: str = typer.Argument(..., help="Action ID"),
) -> None:
    """Deploy an action, creating a new version."""
    try:
        with get_client() as client:
            version = client.actions.deploy(action_id).execute()

            if get_json_flag(ctx):
                output_json(version)
            else:
                _print_version(version, "Deployed version")

    except Exception as e:
        handle_error(e)


@app.command("versions")
def versions(
    ctx: typer.Context,
    action_id: str = typer.Argument(..., help="Action ID"),
    page: Optional[int] = typer.Option(None, "--page", "-p", help="Zero-based page index"),
    per_page: Optional[int] = typer.Option(None, "--per-page", help="Items per page"),
) -> None:
    """List the versions of an action."""
    try:
        with get_client() as client:
            result = client.actions.list_versions(action_id, page=page, per_page=per_page).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                if not result.versions:
                    console.print("[dim]No versions found.[/dim]")
                    return
                output_table(result.versions, columns=VERSION_COLUMNS, title="Versions")

    except Exception as e:
        handle_error(e)


@app.command("version")
def version(
    ctx: typer.Context,
    action_id: str = typer.Argument(..., help="Action ID"),
    version_id: str = typer.Argument(..., help="Version ID"),
) -> None:
    """Show one version of an action."""
    try:
        with get_client() as client:
            result = client.actions.get_version(action_id, version_id).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                _print_version(result, "Version")
                console.print(f"  Deployed: {'Yes' if result.deployed else 'No'}")
                for err in result.errors:
                    console.print(f"  [red]Error:[/red] {err.msg}")

    except Exception as e:
        handle_error(e)


@app.command("rollback")
def rollback(
    ctx: typer.Context,
    action_id: str = typer.Argument(..., help="Action ID"),
    version_id: str = typer.Argument(..., help="Version ID to roll back to"),
) -> None:
    """Roll an action back to a previous version."""
    try:
        with get_client() as client:
            result = client.actions.rollback_version(action_id, version_id).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                _print_version(result, "Rolled back, new version")

    except Exception as e:
        handle_error(e)


@app.command("test")
def test(
    ctx: typer.Context,
    action_id: str = typer.Argument(..., help="Action ID"),
    payload: str = typer.Option("{}", "--payload", "-p", help="Event payload as JSON"),
) -> None:
    """Run an action against a test payload."""
    try:
        try:
            payload_data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise typer.BadParameter(f"Invalid JSON: {e}", param_hint="--payload") from e

        with get_client() as client:
            result = client.actions.test(action_id, payload_data).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                output_json(result.payload)

    except Exception as e:
        handle_error(e)


@app.command("execution")
def execution(
    ctx: typer.Context,
    execution_id: str = typer.Argument(..., help="Execution ID"),
) -> None:
    """Show an action execution."""
    try:
        with get_client() as client:
            result = client.actions.get_execution(execution_id).execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                console.print(f"[bold]Execution {result.id}[/bold]")
                console.print(f"  Trigger: {result.trigger_id or '-'}")
                console.print(f"  Status: {result.status or '-'}")
                for item in result.results:
                    outcome = "[red]failed[/red]" if item.error else "[green]ok[/green]"
                    console.print(f"  {item.action_name or '-'}: {outcome}")

    except Exception as e:
        handle_error(e)


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Show the status of the actions service."""
    try:
        with get_client() as client:
            result = client.actions.get_status().execute()

            if get_json_flag(ctx):
                output_json(result)
            else:
                console.print(f"Actions service: {result.status or 'unknown'}")

    except Exception as e:
        handle_error(e)
