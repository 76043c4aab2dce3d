"""Snapshot CLI commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from vpsie.cli._utils import (
    get_client,
    get_json_flag,
    handle_error,
    output_json,
    output_table,
)
from vpsie.models.snapshot import EnableAutoSnapshotRequest, SnapshotList

app = typer.Typer(help="VM snapshot commands.")
console = Console()

SNAPSHOT_COLUMNS = [
    ("identifier", "ID"),
    ("name", "Name"),
    ("hostname", "VM"),
    ("state", "State"),
    ("dc_identifier", "Datacenter"),
]


def _print_page(ctx: typer.Context, page: SnapshotList) -> None:
    if get_json_flag(ctx):
        output_json(page)
        return

    if not page.items:
        console.print("[dim]No snapshots found.[/dim]")
        return

    output_table(page.items, columns=SNAPSHOT_COLUMNS, title="Snapshots")
    shown_to = page.offset + len(page.items)
    console.print(f"[dim]Showing {page.offset + 1}-{shown_to} of {page.total}[/dim]")


@app.command("list")
def list_snapshots(
    ctx: typer.Context,
    offset: int = typer.Option(0, "--offset", help="Number of snapshots to skip"),
    limit: int = typer.Option(20, "--limit", "-l", help="Number of results"),
) -> None:
    """List snapshots of the account."""
    try:
        client = get_client()
        _print_page(ctx, client.snapshots.list(offset=offset, limit=limit))

    except Exception as e:
        handle_error(e)


@app.command("list-vm")
def list_vm_snapshots(
    ctx: typer.Context,
    vm_identifier: str = typer.Argument(..., help="VM identifier"),
    offset: int = typer.Option(0, "--offset", help="Number of snapshots to skip"),
    limit: int = typer.Option(20, "--limit", "-l", help="Number of results"),
) -> None:
    """List snapshots of one VM."""
    try:
        client = get_client()
        _print_page(ctx, client.snapshots.list_by_vm(vm_identifier, offset=offset, limit=limit))

    except Exception as e:
        handle_error(e)


@app.command("create")
def create(
    vm_identifier: str = typer.Argument(..., help="VM identifier"),
    name: str = typer.Option(..., "--name", "-n", help="Snapshot name"),
) -> None:
    """Take a snapshot of a VM."""
    try:
        client = get_client()
        client.snapshots.create(name, vm_identifier)
        console.print(f"[green]Snapshot '{name}' requested for {vm_identifier}[/green]")

    except Exception as e:
        handle_error(e)


@app.command("rollback")
def rollback(
    snapshot_identifier: str = typer.Argument(..., help="Snapshot identifier"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Roll a VM back to a snapshot."""
    if not yes and not typer.confirm(
        f"Roll back to snapshot {snapshot_identifier}? Current VM state will be lost."
    ):
        raise typer.Abort()

    try:
        client = get_client()
        client.snapshots.rollback(snapshot_identifier)
        console.print(f"[green]Rollback to {snapshot_identifier} started[/green]")

    except Exception as e:
        handle_error(e)


@app.command("enable-auto")
def enable_auto(
    vm_identifier: str = typer.Argument(..., help="VM identifier"),
    period: str = typer.Option(..., "--period", "-p", help="Schedule period (daily, weekly, monthly)"),
    vm_id: int = typer.Option(0, "--vm-id", help="Numeric VM ID"),
    daily: int = typer.Option(0, "--daily", help="Daily snapshots to keep"),
    weekly: int = typer.Option(0, "--weekly", help="Weekly snapshots to keep"),
    monthly: int = typer.Option(0, "--monthly", help="Monthly snapshots to keep"),
    tags: Optional[list[str]] = typer.Option(None, "--tag", "-t", help="Tag (repeatable)"),
) -> None:
    """Schedule automatic snapshots for a VM."""
    try:
        client = get_client()
        client.snapshots.enable_auto(
            EnableAutoSnapshotRequest(
                vm_identifier=vm_identifier,
                vm_id=vm_id,
                period=period,
                daily_snapshot=daily,
                weekly_snapshot=weekly,
                monthly_snapshot=monthly,
                tags=tags or [],
            )
        )
        console.print(f"[green]Automatic {period} snapshots enabled for {vm_identifier}[/green]")

    except Exception as e:
        handle_error(e)


@app.command("delete")
def delete(
    snapshot_identifier: str = typer.Argument(..., help="Snapshot identifier"),
    reason: str = typer.Option("", "--reason", help="Deletion reason"),
    note: str = typer.Option("", "--note", help="Deletion note"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a snapshot."""
    if not yes and not typer.confirm(f"Delete snapshot {snapshot_identifier}?"):
        raise typer.Abort()

    try:
        client = get_client()
        client.snapshots.delete(snapshot_identifier, reason=reason, note=note)
        console.print(f"[green]Snapshot {snapshot_identifier} deleted[/green]")

    except Exception as e:
        handle_error(e)
