"""CLI utilities."""

from __future__ import annotations

import json
import logging
from typing import Any, NoReturn, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from vpsie.client import VpsieClient
from vpsie.exceptions import AuthenticationError, VpsieError
from vpsie.models.common import VpsieModel

console = Console()
error_console = Console(stderr=True)


def get_client() -> VpsieClient:
    """Get an authenticated VpsieClient from environment and config file."""
    try:
        return VpsieClient()
    except AuthenticationError as e:
        error_console.print(f"[red]Authentication error:[/red] {e}")
        error_console.print("\nTo authenticate, run:")
        error_console.print("  vpsie config set api_key <token>")
        raise typer.Exit(1) from None


def setup_logging(verbose: bool) -> None:
    """Route SDK logs to stderr through Rich."""
    sdk_logger = logging.getLogger("vpsie")
    if any(isinstance(h, RichHandler) for h in sdk_logger.handlers):
        return
    handler = RichHandler(console=error_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def output_json(data: Any) -> None:
    """Print a model, a list of models or plain data as JSON."""
    if isinstance(data, VpsieModel):
        data = data.model_dump(mode="json")
    elif isinstance(data, list):
        data = [
            item.model_dump(mode="json") if isinstance(item, VpsieModel) else item
            for item in data
        ]

    console.print_json(json.dumps(data, default=str))


def output_table(
    items: Sequence[VpsieModel],
    columns: list[tuple[str, str]],
    title: str | None = None,
) -> None:
    """Render models as a Rich table.

    Args:
        items: Models to render, one row each.
        columns: (attribute, header) pairs.
        title: Optional table title.
    """
    table = Table(title=title, header_style="bold")
    for _, header in columns:
        table.add_column(header)
    for item in items:
        table.add_row(*(_cell(getattr(item, attr, None)) for attr, _ in columns))

    console.print(table)


def _cell(value: Any) -> str:
    return "-" if value is None or value == "" else str(value)


def handle_error(e: Exception) -> NoReturn:
    """Report a failed command on stderr and exit with status 1."""
    if isinstance(e, typer.Exit):
        raise e
    message = e.message if isinstance(e, VpsieError) else str(e)
    error_console.print(f"[red]Error:[/red] {message}")
    if isinstance(e, AuthenticationError):
        error_console.print("Check the token with: vpsie config get api_key")
    raise typer.Exit(1)


def get_json_flag(ctx: typer.Context) -> bool:
    """Get JSON output flag from context."""
    return ctx.obj.get("json", False) if ctx.obj else False
