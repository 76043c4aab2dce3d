"""Configuration CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from vpsie._config import (
    CONFIG_FILE,
    VpsieConfig,
    get_config_value,
    set_config_value,
)

app = typer.Typer(help="Configuration management.")
console = Console()

# (config file key, VpsieConfig attribute)
LISTED_KEYS = [
    ("api_key", "api_key"),
    ("api_url", "base_url"),
    ("timeout", "timeout"),
    ("max_retries", "max_retries"),
    ("verify_ssl", "verify_ssl"),
    ("debug", "debug"),
]


def _mask(value: str) -> str:
    return value[:8] + "..." + value[-4:] if len(value) > 12 else "***"


def _parse_value(raw: str) -> str | bool | int | float:
    """Coerce a command-line value to the TOML type it represents."""
    if raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            pass
    return raw


@app.command("get")
def get(
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Get the effective value of a configuration key.

    Example:
        vpsie config get api_url
    """
    value = get_config_value(key)
    if value is None:
        console.print(f"[dim]No value set for '{key}'[/dim]")
        return
    console.print(_mask(str(value)) if key == "api_key" else value)


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value.

    Example:
        vpsie config set api_key <token>
        vpsie config set timeout 120
    """
    set_config_value(key, _parse_value(value))
    shown = _mask(value) if key == "api_key" else value
    console.print(f"[green]Set {key} = {shown}[/green]")


@app.command("list")
def list_config() -> None:
    """Show the effective configuration (env > config file > defaults)."""
    config = VpsieConfig.load()

    console.print("[bold]Current Configuration[/bold]\n")
    for key, attr in LISTED_KEYS:
        value = getattr(config, attr)
        if key == "api_key":
            value = _mask(value) if value else "[dim]not set[/dim]"
        console.print(f"  {key}: {value}")

    console.print(f"\n[dim]Config file: {CONFIG_FILE}[/dim]")


@app.command("path")
def show_path() -> None:
    """Show configuration file path."""
    console.print(str(CONFIG_FILE))
