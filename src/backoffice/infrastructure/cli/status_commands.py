"""CLI commands for the order status registry."""

from __future__ import annotations

from pathlib import Path

import click

from backoffice.application.manage_statuses import (
    CreateStatusHandler,
    DeleteStatusHandler,
    ListStatusesHandler,
    UpdateStatusHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.domain.model.order_status import StatusColor
from backoffice.infrastructure.bootstrap import status_repository

_PALETTE = [c.value for c in StatusColor]


@click.command("list")
@click.pass_obj
def status_list(data_dir: Path | None) -> None:
    """List configured order statuses."""
    statuses = ListStatusesHandler(status_repository(data_dir)).handle()

    if not statuses:
        click.echo("No statuses configured.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} Color")
    click.echo("-" * 42)
    for s in statuses:
        click.echo(f"{s.id:<6} {s.name:<28} {s.color}")


@click.command("add")
@click.option("--name", required=True, help="Status label.")
@click.option("--color", default="gray", show_default=True, help=f"One of: {', '.join(_PALETTE)}.")
@click.pass_obj
def status_add(data_dir: Path | None, name: str, color: str) -> None:
    """Add a status to the registry."""
    try:
        created = CreateStatusHandler(status_repository(data_dir)).handle(name, color)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Status #{created.id} '{created.name}' ({created.color}) added.")


@click.command("update")
@click.option("--id", "status_id", required=True, help="Status ID.")
@click.option("--name", default=None, help="New label.")
@click.option("--color", default=None, help=f"One of: {', '.join(_PALETTE)}.")
@click.pass_obj
def status_update(
    data_dir: Path | None,
    status_id: str,
    name: str | None,
    color: str | None,
) -> None:
    """Rename or recolor a status. Existing orders keep their old label."""
    try:
        updated = UpdateStatusHandler(status_repository(data_dir)).handle(
            status_id, name=name, color=color
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Status #{updated.id} is now '{updated.name}' ({updated.color}).")


@click.command("delete")
@click.option("--id", "status_id", required=True, help="Status ID.")
@click.pass_obj
def status_delete(data_dir: Path | None, status_id: str) -> None:
    """Remove a status. Orders already carrying it are left alone."""
    try:
        DeleteStatusHandler(status_repository(data_dir)).handle(status_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Status #{status_id} deleted.")
