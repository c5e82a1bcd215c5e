"""CLI commands for the Order aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.delete_order import SoftDeleteOrderHandler
from backoffice.application.dto import OrderDTO, OrderLineSpec
from backoffice.application.shop_settings import ShowInvoiceHandler
from backoffice.application.show_order import ListOrdersHandler, ShowOrderHandler
from backoffice.application.update_order import (
    RecordPaymentHandler,
    SetOrderStatusHandler,
    UpdateOrderHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    shop_info_repository,
    status_repository,
    user_repository,
)


def _parse_lines(raw: str) -> list[OrderLineSpec]:
    """Parse '1:3,2:5' (product id : quantity) into OrderLineSpec list."""
    specs: list[OrderLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderLineSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    title = f"Order #{dto.id}  (status={dto.status})"
    if dto.deleted:
        title += "  [DELETED]"
    click.echo(title)
    click.echo(f"Customer: {dto.customer_name or f'User ID: {dto.customer_id}'}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        name = item.product_name or f"#{item.product_id} (removed)"
        click.echo(
            f"  {name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount:>16} {dto.currency}")
    click.echo(f"  {'Amount Paid':<27} {dto.amount_paid:>16} {dto.currency}")
    click.echo(f"  {'Remaining':<27} {dto.remaining:>16} {dto.currency}")


def _order_table(orders: list[OrderDTO]) -> None:
    click.echo(
        f"{'ID':<6} {'Customer':<20} {'Status':<22} {'Total':>10} {'Paid':>10} {'Remaining':>10}  Created"
    )
    click.echo("-" * 100)
    for o in orders:
        customer = o.customer_name or f"User ID: {o.customer_id}"
        state = "DELETED" if o.deleted else o.status
        click.echo(
            f"{o.id:<6} {customer:<20} {state:<22} {o.total_amount:>10} "
            f"{o.amount_paid:>10} {o.remaining:>10}  {o.created_at[:10]}"
        )


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer (user) ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--deposit", default="0", show_default=True, help="Initial amount paid.")
@click.option("--status", "initial_status", default=None, help="Initial status (defaults to the first configured status).")
@click.pass_obj
def order_create(
    data_dir: Path | None,
    customer_id: str,
    items: str,
    deposit: str,
    initial_status: str | None,
) -> None:
    """Create a new order."""
    specs = _parse_lines(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(data_dir),
        product_repo=product_repository(data_dir),
        status_repo=status_repository(data_dir),
        user_repo=user_repository(data_dir),
    )

    try:
        dto = handler.handle(
            customer_id=customer_id,
            lines=specs,
            deposit=deposit,
            initial_status=initial_status,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(data_dir: Path | None, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(
        order_repo=order_repository(data_dir),
        user_repo=user_repository(data_dir),
        product_repo=product_repository(data_dir),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--active", is_flag=True, default=False, help="Hide deleted orders.")
@click.pass_obj
def order_list(data_dir: Path | None, active: bool) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(
        order_repo=order_repository(data_dir),
        user_repo=user_repository(data_dir),
        product_repo=product_repository(data_dir),
    )
    orders = handler.handle(include_deleted=not active)

    if not orders:
        click.echo("No orders found.")
        return
    _order_table(orders)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--to", "new_status", required=True, help="New status label.")
@click.pass_obj
def order_status(data_dir: Path | None, order_id: str, new_status: str) -> None:
    """Change an order's status."""
    handler = SetOrderStatusHandler(order_repo=order_repository(data_dir))

    try:
        handler.handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status set to '{new_status.strip()}'.")


@click.command("pay")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--amount", required=True, help="Total amount paid so far (replaces the current value).")
@click.pass_obj
def order_pay(data_dir: Path | None, order_id: str, amount: str) -> None:
    """Record the amount paid on an order."""
    handler = RecordPaymentHandler(order_repo=order_repository(data_dir))

    try:
        handler.handle(order_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} amount paid set to {amount}.")


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", default=None, help="New status label.")
@click.option("--amount", default=None, help="Total amount paid so far.")
@click.pass_obj
def order_update(
    data_dir: Path | None,
    order_id: str,
    status: str | None,
    amount: str | None,
) -> None:
    """Edit status and amount paid together; nothing is saved if either is invalid."""
    if status is None and amount is None:
        raise click.UsageError("Give --status, --amount or both.")

    handler = UpdateOrderHandler(order_repo=order_repository(data_dir))

    try:
        handler.handle(order_id, status=status, amount_paid=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} updated.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
@click.confirmation_option(prompt="Mark this order as deleted?")
@click.pass_obj
def order_delete(data_dir: Path | None, order_id: str) -> None:
    """Mark an order as deleted (it stays in the history)."""
    handler = SoftDeleteOrderHandler(order_repo=order_repository(data_dir))

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} marked as deleted.")


@click.command("invoice")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def order_invoice(data_dir: Path | None, order_id: str) -> None:
    """Print an invoice for an order."""
    handler = ShowInvoiceHandler(
        order_repo=order_repository(data_dir),
        user_repo=user_repository(data_dir),
        product_repo=product_repository(data_dir),
        shop_repo=shop_info_repository(data_dir),
    )

    try:
        invoice = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    shop = invoice.shop
    click.echo(shop.name)
    click.echo(shop.address)
    click.echo(shop.phone)
    click.echo("=" * 49)
    click.echo(f"INVOICE #{invoice.order.id}")
    if invoice.customer_address:
        click.echo(f"Bill to:  {invoice.customer_address}")
    if invoice.customer_phone:
        click.echo(f"Phone:    {invoice.customer_phone}")
    _display_order(invoice.order)
    click.echo("=" * 49)
    click.echo(shop.invoice_footer)
