from pathlib import Path

import click

from backoffice.infrastructure.bootstrap import DATA_DIR_ENV
from backoffice.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_invoice,
    order_list,
    order_pay,
    order_show,
    order_status,
    order_update,
)
from backoffice.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from backoffice.infrastructure.cli.report_commands import (
    report_dashboard,
    report_history,
    report_low_stock,
    report_sales,
)
from backoffice.infrastructure.cli.settings_commands import settings_show, settings_update
from backoffice.infrastructure.cli.status_commands import (
    status_add,
    status_delete,
    status_list,
    status_update,
)
from backoffice.infrastructure.cli.user_commands import (
    user_add,
    user_delete,
    user_list,
    user_show,
    user_update,
)
from backoffice.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help=f"Directory holding the JSON data files (env: {DATA_DIR_ENV}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Shop back office: orders, payments, catalog and reports"""
    configure_logging(verbose)
    ctx.obj = data_dir


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def status() -> None:
    """Manage order statuses."""


@cli.group()
def user() -> None:
    """Manage users and customers."""


@cli.group()
def report() -> None:
    """Sales and inventory reports."""


@cli.group()
def settings() -> None:
    """Shop details printed on invoices."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_invoice)
order.add_command(order_list)
order.add_command(order_pay)
order.add_command(order_show)
order.add_command(order_status)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
status.add_command(status_add)
status.add_command(status_delete)
status.add_command(status_list)
status.add_command(status_update)
user.add_command(user_add)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_show)
user.add_command(user_update)
report.add_command(report_dashboard)
report.add_command(report_history)
report.add_command(report_low_stock)
report.add_command(report_sales)
settings.add_command(settings_show)
settings.add_command(settings_update)
