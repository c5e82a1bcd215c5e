"""CLI commands for users and customers."""

from __future__ import annotations

from pathlib import Path

import click

from backoffice.application.manage_users import (
    AddUserHandler,
    DeleteUserHandler,
    ListUsersHandler,
    ShowUserHandler,
    UpdateUserHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.domain.model.user import UserRole
from backoffice.infrastructure.bootstrap import user_repository


@click.command("add")
@click.option("--name", required=True, help="Full name.")
@click.option(
    "--role",
    default=UserRole.CUSTOMER.value,
    show_default=True,
    type=click.Choice([r.value for r in UserRole]),
)
@click.option("--email", default=None)
@click.option("--phone", default=None)
@click.option("--address", default=None)
@click.pass_obj
def user_add(
    data_dir: Path | None,
    name: str,
    role: str,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Add a user (customers by default)."""
    handler = AddUserHandler(user_repository(data_dir))

    try:
        user = handler.handle(name=name, role=role, email=email, phone=phone, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.name}' added as {user.role}.")


@click.command("list")
@click.option("--customers", is_flag=True, default=False, help="Only show customers.")
@click.pass_obj
def user_list(data_dir: Path | None, customers: bool) -> None:
    """List users."""
    users = ListUsersHandler(user_repository(data_dir)).handle(customers_only=customers)

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Role':<12} Email")
    click.echo("-" * 60)
    for u in users:
        click.echo(f"{u.id:<6} {u.name:<24} {u.role:<12} {u.email or ''}")


@click.command("show")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.pass_obj
def user_show(data_dir: Path | None, user_id: str) -> None:
    """Show a user's contact details."""
    try:
        user = ShowUserHandler(user_repository(data_dir)).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id}  {user.name} ({user.role})")
    click.echo(f"Email:   {user.email or '-'}")
    click.echo(f"Phone:   {user.phone or '-'}")
    click.echo(f"Address: {user.address or '-'}")


@click.command("update")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--role", default=None, type=click.Choice([r.value for r in UserRole]))
@click.option("--email", default=None, help="New email ('' clears it).")
@click.option("--phone", default=None, help="New phone ('' clears it).")
@click.option("--address", default=None, help="New address ('' clears it).")
@click.pass_obj
def user_update(
    data_dir: Path | None,
    user_id: str,
    name: str | None,
    role: str | None,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Edit a user's profile."""
    handler = UpdateUserHandler(user_repository(data_dir))

    try:
        handler.handle(
            user_id, name=name, role=role, email=email, phone=phone, address=address
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} updated.")


@click.command("delete")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.confirmation_option(prompt="Remove this user? Their orders are kept.")
@click.pass_obj
def user_delete(data_dir: Path | None, user_id: str) -> None:
    """Remove a user from the directory."""
    try:
        DeleteUserHandler(user_repository(data_dir)).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} deleted.")
