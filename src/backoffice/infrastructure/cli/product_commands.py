"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from backoffice.application.add_product import AddProductHandler
from backoffice.application.delete_product import DeleteProductHandler
from backoffice.application.mappers import product_to_dto
from backoffice.application.update_product import UpdateProductHandler
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", "stock_quantity", default=0, type=int, show_default=True, help="Units in stock.")
@click.option("--description", default="", help="Short description.")
@click.pass_obj
def product_add(
    data_dir: Path | None,
    name: str,
    price: str,
    stock_quantity: int,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(data_dir))

    try:
        product = handler.handle(
            name=name,
            price=price,
            description=description,
            stock_quantity=stock_quantity,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path | None) -> None:
    """List all products in the catalog."""
    products = [product_to_dto(p) for p in product_repository(data_dir).list_all()]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.price:>10} {p.stock_quantity:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", "stock_quantity", default=None, type=int, help="New stock level.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    data_dir: Path | None,
    product_id: str,
    name: str | None,
    price: str | None,
    stock_quantity: int | None,
    description: str | None,
) -> None:
    """Edit a product. Existing orders keep the price they were sold at."""
    handler = UpdateProductHandler(product_repo=product_repository(data_dir))

    try:
        handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            price=price,
            stock_quantity=stock_quantity,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Remove this product from the catalog?")
@click.pass_obj
def product_delete(data_dir: Path | None, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository(data_dir))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
