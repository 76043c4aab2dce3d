"""Main CLI entry point."""

from __future__ import annotations

import typer
from rich.console import Console

from vpsie._config import VpsieConfig
from vpsie._version import __version__
from vpsie.cli import config, k8s, snapshot
from vpsie.cli._utils import setup_logging

app = typer.Typer(
    name="vpsie",
    help="VPSie CLI - Kubernetes clusters and VM snapshots.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register sub-commands
app.add_typer(k8s.app, name="k8s", help="Kubernetes cluster management")
app.add_typer(snapshot.app, name="snapshot", help="VM snapshot management")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"vpsie-sdk version {__version__}")


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
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log HTTP requests to stderr",
    ),
) -> None:
    """VPSie CLI - Kubernetes clusters and VM snapshots."""
    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    if verbose or VpsieConfig.load().debug:
        setup_logging(verbose=True)


if __name__ == "__main__":
    app()
