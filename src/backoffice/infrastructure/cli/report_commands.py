"""CLI commands for sales and inventory reports."""

from __future__ import annotations

from pathlib import Path

import click

from backoffice.application.reports import (
    DashboardHandler,
    LowStockHandler,
    SalesReportHandler,
    TransactionHistoryHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.domain.service.report_aggregator import LOW_STOCK_THRESHOLD, SalesPeriod
from backoffice.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    user_repository,
)


def _repos(data_dir: Path | None) -> dict:
    return {
        "order_repo": order_repository(data_dir),
        "product_repo": product_repository(data_dir),
        "user_repo": user_repository(data_dir),
    }


@click.command("sales")
@click.option(
    "--period",
    default=SalesPeriod.MONTHLY.value,
    show_default=True,
    type=click.Choice([p.value for p in SalesPeriod]),
)
@click.pass_obj
def report_sales(data_dir: Path | None, period: str) -> None:
    """Gross sales per day, month or year (deleted orders excluded)."""
    try:
        buckets = SalesReportHandler(**_repos(data_dir)).handle(period)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Period':<12} {'Orders':>7} {'Sales':>14}")
    click.echo("-" * 35)
    for b in buckets:
        click.echo(f"{b.period:<12} {b.order_count:>7} {b.total_sales:>14}")


@click.command("low-stock")
@click.option("--threshold", default=LOW_STOCK_THRESHOLD, show_default=True, type=int)
@click.pass_obj
def report_low_stock(data_dir: Path | None, threshold: int) -> None:
    """Products with stock below the threshold."""
    products = LowStockHandler(**_repos(data_dir)).handle(threshold)

    if not products:
        click.echo("No products below the threshold.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Stock left':>10}")
    click.echo("-" * 42)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.stock_quantity:>10}")


@click.command("history")
@click.pass_obj
def report_history(data_dir: Path | None) -> None:
    """Every order ever placed, newest first, deleted ones marked."""
    orders = TransactionHistoryHandler(**_repos(data_dir)).handle()

    if not orders:
        click.echo("No transactions yet.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Status':<22} {'Total':>10}  Date")
    click.echo("-" * 72)
    for o in orders:
        customer = o.customer_name or f"User ID: {o.customer_id}"
        state = "DELETED" if o.deleted else o.status
        click.echo(f"{o.id:<6} {customer:<20} {state:<22} {o.total_amount:>10}  {o.created_at[:10]}")


@click.command("dashboard")
@click.pass_obj
def report_dashboard(data_dir: Path | None) -> None:
    """Headline numbers for the shop."""
    summary = DashboardHandler(**_repos(data_dir)).handle()

    click.echo(f"Total sales:     {summary.cash_collected} {summary.currency}")
    click.echo(f"Total orders:    {summary.orders}")
    click.echo(f"Total products:  {summary.products}")
    click.echo(f"Total customers: {summary.customers}")
    click.echo(f"Total users:     {summary.users}")
