"""Configuration CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from auth0_mgmt._config import (
    CONFIG_FILE,
    ManagementConfig,
    get_config_value,
    set_config_value,
)

app = typer.Typer(help="Configuration management.")
console = Console()

KNOWN_KEYS = ("domain", "api_token", "base_url", "timeout", "verify_ssl", "debug")
BOOL_KEYS = ("verify_ssl", "debug")


def _mask(token: str) -> str:
    return token[:8] + "..." + token[-4:] if len(token) > 12 else "***"


@app.command("get")
def get(
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Get a configuration value.

    Example:
        auth0-mgmt config get domain
    """
    value = get_config_value(key)

    if value is None:
        console.print(f"[dim]No value set for '{key}'[/dim]")
    else:
        if key == "api_token":
            value = _mask(value)
        console.print(value)


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value.

    Example:
        auth0-mgmt config set domain my-tenant.auth0.com
        auth0-mgmt config set timeout 120
    """
    if key not in KNOWN_KEYS:
        console.print(f"[red]Unknown key: {key}[/red]")
        console.print(f"Known keys: {', '.join(KNOWN_KEYS)}")
        raise typer.Exit(1)

    typed_value: str | bool | float = value
    if key in BOOL_KEYS:
        if value.lower() not in ("true", "false"):
            console.print(f"[red]{key} must be true or false[/red]")
            raise typer.Exit(1)
        typed_value = value.lower() == "true"
    elif key == "timeout":
        try:
            typed_value = float(value)
        except ValueError:
            console.print("[red]timeout must be a number of seconds[/red]")
            raise typer.Exit(1) from None

    set_config_value(key, typed_value)
    shown = _mask(value) if key == "api_token" else value
    console.print(f"[green]Set {key} = {shown}[/green]")


@app.command("list")
def list_config() -> None:
    """List all configuration values."""
    config = ManagementConfig.load()

    console.print("[bold]Current Configuration[/bold]\n")

    console.print("  api_token:", end=" ")
    if config.api_token:
        console.print(_mask(config.api_token))
    else:
        console.print("[dim]not set[/dim]")

    console.print(f"  domain: {config.domain or '-'}")
    console.print(f"  base_url: {config.resolved_base_url or '-'}")
    console.print(f"  timeout: {config.timeout}")
    console.print(f"  verify_ssl: {config.verify_ssl}")
    console.print(f"  debug: {config.debug}")

    console.print(f"\n[dim]Config file: {CONFIG_FILE}[/dim]")


@app.command("path")
def show_path() -> None:
    """Show configuration file path."""
    console.print(str(CONFIG_FILE))
