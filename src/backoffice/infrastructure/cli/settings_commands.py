"""CLI commands for shop settings."""

from __future__ import annotations

from pathlib import Path

import click

from backoffice.application.shop_settings import ShowShopInfoHandler, UpdateShopInfoHandler
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import shop_info_repository


@click.command("show")
@click.pass_obj
def settings_show(data_dir: Path | None) -> None:
    """Show the shop details."""
    info = ShowShopInfoHandler(shop_info_repository(data_dir)).handle()
    click.echo(f"Name:     {info.name}")
    click.echo(f"Address:  {info.address}")
    click.echo(f"Phone:    {info.phone}")
    click.echo(f"Footer:   {info.invoice_footer}")


@click.command("update")
@click.option("--name", default=None)
@click.option("--address", default=None)
@click.option("--phone", default=None)
@click.option("--footer", "invoice_footer", default=None, help="Invoice footer text.")
@click.pass_obj
def settings_update(
    data_dir: Path | None,
    name: str | None,
    address: str | None,
    phone: str | None,
    invoice_footer: str | None,
) -> None:
    """Change the shop details."""
    handler = UpdateShopInfoHandler(shop_info_repository(data_dir))

    try:
        handler.handle(name=name, address=address, phone=phone, invoice_footer=invoice_footer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Shop settings updated.")
