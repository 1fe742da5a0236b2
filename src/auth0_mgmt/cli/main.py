"""Main CLI entry point."""

from __future__ import annotations

import typer
from rich.console import Console

from auth0_mgmt._config import ManagementConfig
from auth0_mgmt._version import __version__
from auth0_mgmt.cli import action, config, trigger
from auth0_mgmt.cli._utils import setup_logging

app = typer.Typer(
    name="auth0-mgmt",
    help="Auth0 Management CLI - actions, triggers and versions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(action.app, name="action", help="Action management")
app.add_typer(trigger.app, name="trigger", help="Triggers and bindings")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"auth0-mgmt-sdk version {__version__}")


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log HTTP requests to stderr",
    ),
) -> None:
    """Auth0 Management CLI - actions, triggers and versions."""
    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    setup_logging(debug or ManagementConfig.load().debug)


if __name__ == "__main__":
    app()
