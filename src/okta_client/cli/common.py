"""Common CLI helpers.

Provides:
- `run_async_command`: Unified async execution with error handling for CLI commands
- Rendering helpers shared by the resource commands
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Annotated, TypeVar

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from okta_client.exceptions import OktaClientError, OktaRateLimitError
from okta_client.response import OktaResponse

# Shared console instance for CLI output
console = Console()

T = TypeVar("T")


def run_async_command(
    coro: Coroutine[object, object, T],
    *,
    error_prefix: str = "Error",
) -> T:
    """Execute async code from synchronous CLI command with unified error handling.

    Client errors print a user-friendly message and exit with code 1.
    Rate limit errors also print when the limit resets.

    Args:
        coro: Async coroutine to execute
        error_prefix: Prefix for error messages (default: "Error")

    Returns:
        Result from the coroutine

    Raises:
        typer.Exit: Re-raised from deliberate exits, or raised with code 1 on error
    """
    try:
        return asyncio.run(coro)
    except typer.Exit:
        raise
    except OktaRateLimitError as e:
        console.print(f"[red]{error_prefix}:[/red] {escape(str(e))}")
        if e.reset_at:
            console.print(f"  Resets at: {e.reset_at.strftime('%H:%M:%S UTC')}")
        raise typer.Exit(1) from None
    except OktaClientError as e:
        console.print(f"[red]{error_prefix}:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


TimeoutOption = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        "-t",
        help="Deadline in seconds for the API call",
    ),
]
"""Per-call deadline option.

Usage:
    def get(resource_id: str, timeout: TimeoutOption = None) -> None:
"""


def render_model(title: str, model: BaseModel, fields: list[str]) -> Table:
    """Render selected (dotted) attributes of a model as a two-column table."""
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for dotted in fields:
        value: object = model
        for part in dotted.split("."):
            value = getattr(value, part, None)
            if value is None:
                break
        table.add_row(dotted, "" if value is None else escape(str(value)))

    return table


def render_response(response: OktaResponse) -> Table:
    """Render the rate limit and request id of a response."""
    rate = response.rate
    table = Table(title="Response", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("status", str(response.status_code))
    table.add_row("request id", response.request_id or "-")
    table.add_row("rate limit", f"{rate.remaining}/{rate.limit}")
    table.add_row(
        "resets at",
        rate.reset_at.strftime("%H:%M:%S UTC") if rate.reset_at else "-",
    )
    if response.pagination.next:
        table.add_row("next page", response.pagination.next)
    return table
