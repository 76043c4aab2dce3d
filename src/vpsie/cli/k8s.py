"""Kubernetes cluster CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from vpsie.cli._utils import (
    get_client,
    get_json_flag,
    handle_error,
    output_json,
    output_table,
)
from vpsie.models.k8s import CreateK8sRequest

app = typer.Typer(help="Kubernetes cluster commands.")
console = Console()


@app.command("list")
def list_clusters(ctx: typer.Context) -> None:
    """List Kubernetes clusters."""
    try:
        client = get_client()
        clusters = client.k8s.list()

        if get_json_flag(ctx):
            output_json(clusters)
        else:
            if not clusters:
                console.print("[dim]No clusters found.[/dim]")
                return

            output_table(
                clusters,
                columns=[
                    ("identifier", "ID"),
                    ("cluster_name", "Name"),
                    ("manager_count", "Managers"),
                    ("slave_count", "Workers"),
                    ("cpu", "vCPU"),
                    ("ram", "RAM (MB)"),
                    ("price", "Price"),
                    ("created_on", "Created"),
                ],
                title="Kubernetes Clusters",
            )

    except Exception as e:
        handle_error(e)


@app.command("get")
def get(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="Cluster identifier"),
) -> None:
    """Show cluster details and nodes."""
    try:
        client = get_client()
        cluster = client.k8s.get(identifier)

        if get_json_flag(ctx):
            output_json(cluster)
        else:
            console.print(f"[bold]{cluster.cluster_name}[/bold] ({cluster.identifier})")
            console.print(f"  Nodes: {cluster.count}")
            console.print(f"  vCPU / RAM: {cluster.cpu} / {cluster.ram} MB")
            console.print(f"  Price: {cluster.price}")
            console.print(f"  Created: {cluster.created_on or '-'}")

            if cluster.nodes:
                output_table(
                    cluster.nodes,
                    columns=[
                        ("hostname", "Hostname"),
                        ("node_type", "Type"),
                        ("default_ip", "Public IP"),
                        ("private_ip", "Private IP"),
                        ("created_on", "Created"),
                    ],
                    title="Nodes",
                )

    except Exception as e:
        handle_error(e)


@app.command("create")
def create(
    name: str = typer.Option(..., "--name", "-n", help="Cluster name"),
    dc_identifier: str = typer.Option(..., "--dc", help="Datacenter identifier"),
    resource_identifier: str = typer.Option(..., "--resource", help="Plan identifier"),
    project_identifier: str = typer.Option(..., "--project", help="Project identifier"),
    masters: int = typer.Option(1, "--masters", help="Number of manager nodes"),
    workers: int = typer.Option(1, "--workers", help="Number of worker nodes"),
    vpc_id: int = typer.Option(0, "--vpc-id", help="VPC ID (0 for none)"),
    kuber_ver: int = typer.Option(0, "--kuber-ver", help="Kubernetes version ID"),
) -> None:
    """Create a Kubernetes cluster."""
    try:
        client = get_client()
        client.k8s.create(
            CreateK8sRequest(
                cluster_name=name,
                dc_identifier=dc_identifier,
                nodes_count_master=masters,
                nodes_count_slave=workers,
                vpc_id=vpc_id,
                kuber_ver=kuber_ver,
                resource_identifier=resource_identifier,
                project_identifier=project_identifier,
            )
        )
        console.print(f"[green]Cluster '{name}' creation requested[/green]")

    except Exception as e:
        handle_error(e)


@app.command("delete")
def delete(
    identifier: str = typer.Argument(..., help="Cluster identifier"),
    reason: str = typer.Option("", "--reason", help="Deletion reason"),
    note: str = typer.Option("", "--note", help="Deletion note"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a Kubernetes cluster."""
    if not yes and not typer.confirm(f"Delete cluster {identifier}?"):
        raise typer.Abort()

    try:
        client = get_client()
        client.k8s.delete(identifier, reason=reason, note=note)
        console.print(f"[green]Cluster {identifier} deleted[/green]")

    except Exception as e:
        handle_error(e)


@app.command("add-node")
def add_node(
    identifier: str = typer.Argument(..., help="Cluster identifier"),
) -> None:
    """Add a worker node to a cluster."""
    try:
        client = get_client()
        client.k8s.add_slave(identifier)
        console.print(f"[green]Worker node added to {identifier}[/green]")

    except Exception as e:
        handle_error(e)


@app.command("remove-node")
def remove_node(
    identifier: str = typer.Argument(..., help="Cluster identifier"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove a worker node from a cluster."""
    if not yes and not typer.confirm(f"Remove a worker node from {identifier}?"):
        raise typer.Abort()

    try:
        client = get_client()
        client.k8s.remove_slave(identifier)
        console.print(f"[green]Worker node removed from {identifier}[/green]")

    except Exception as e:
        handle_error(e)
