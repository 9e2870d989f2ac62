"""Main CLI application for the Okta client."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from okta_client import __version__
from okta_client.cli import resources
from okta_client.cli.common import TimeoutOption, render_response, run_async_command
from okta_client.client import OktaClient
from okta_client.config import get_settings
from okta_client.logging import setup_logging

app = typer.Typer(
    name="okta-client",
    help="Query the Okta identity management API.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"okta-client version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-error output (WARNING level).",
        ),
    ] = False,
) -> None:
    """Okta client - inspect users, groups and applications."""
    settings = get_settings()
    log_config = settings.logging

    setup_logging(
        level=settings.log_level,
        verbose=verbose,
        quiet=quiet,
        log_file=Path(log_config.log_file) if log_config.log_file else None,
        rotation=log_config.rotation,
        retention=log_config.retention,
        serialize=log_config.serialize,
    )


@app.command()
def check(timeout: TimeoutOption = None) -> None:
    """Verify API connectivity and token validity by fetching the token's owner.

    Examples:
        okta-client check
    """

    async def _check() -> None:
        async with OktaClient() as client:
            console.print(f"[bold]Connecting to {client.base_url}...[/bold]")
            user, response = await client.users.get_by_id("me", timeout=timeout)

        login = user.profile.login if user is not None else "unknown"
        console.print(f"  Authenticated as: {login}")
        console.print(render_response(response))

        if 0 < response.rate.remaining < 10:
            console.print("[yellow]Warning:[/yellow] Low rate limit remaining")

        console.print("\n[green]Okta API connection verified![/green]")

    run_async_command(_check(), error_prefix="Connection check failed")


# Register subcommands
app.add_typer(resources.users_app, name="users")
app.add_typer(resources.groups_app, name="groups")
app.add_typer(resources.apps_app, name="apps")


if __name__ == "__main__":
    app()
