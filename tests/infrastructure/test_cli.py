"""Smoke tests for the click command line, run against a temp data dir."""

import pytest
from click.testing import CliRunner

from backoffice.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str, ok: bool = True):
        result = runner.invoke(cli, ["--data-dir", str(tmp_path), *args])
        if ok:
            assert result.exit_code == 0, result.output
        return result

    return _run


@pytest.fixture
def shop(run):
    run("user", "add", "--name", "Customer One", "--address", "123 Main St")
    run("product", "add", "--name", "Product A", "--price", "50.00", "--stock", "5")
    run("product", "add", "--name", "Product B", "--price", "20.00", "--stock", "20")
    return run


def test_order_lifecycle(shop):
    result = shop("order", "create", "--customer", "1", "--items", "1:2,2:1", "--deposit", "30")
    assert "Order #1 created." in result.output
    assert "120.00" in result.output
    assert "(status=Started)" in result.output

    failed = shop("order", "pay", "--id", "1", "--amount", "150", ok=False)
    assert failed.exit_code == 1
    assert "cannot exceed" in failed.output

    shop("order", "pay", "--id", "1", "--amount", "120")
    shop("order", "status", "--id", "1", "--to", "Completed")

    shown = shop("order", "show", "--id", "1").output
    assert "(status=Completed)" in shown
    assert "Customer One" in shown

    shop("order", "delete", "--id", "1", "--yes")
    assert "DELETED" in shop("report", "history").output
    assert "No orders found." in shop("order", "list", "--active").output


def test_order_update_is_all_or_nothing(shop):
    shop("order", "create", "--customer", "1", "--items", "1:2,2:1")

    failed = shop("order", "update", "--id", "1", "--status", "Completed", "--amount", "500", ok=False)
    assert failed.exit_code == 1
    assert "(status=Started)" in shop("order", "show", "--id", "1").output

    shop("order", "update", "--id", "1", "--status", "Completed", "--amount", "120")
    shown = shop("order", "show", "--id", "1").output
    assert "(status=Completed)" in shown
    assert f"  {'Remaining':<27} {'0.00':>16} EGP" in shown

    empty = shop("order", "update", "--id", "1", ok=False)
    assert empty.exit_code == 2


def test_duplicate_lines_merge(shop):
    shop("order", "create", "--customer", "1", "--items", "2:1,2:2")
    shown = shop("order", "show", "--id", "1").output
    assert "60.00" in shown


def test_bad_items_format(shop):
    result = shop("order", "create", "--customer", "1", "--items", "oops", ok=False)
    assert result.exit_code == 2
    assert "Expected 'ProductId:Quantity'" in result.output


def test_unknown_order(run):
    result = run("order", "show", "--id", "99", ok=False)
    assert result.exit_code == 1
    assert "Order #99 not found" in result.output


def test_status_commands(run):
    assert "Started" in run("status", "list").output
    run("status", "add", "--name", "On Hold", "--color", "pink")

    bad = run("status", "add", "--name", "Packed", "--color", "orange", ok=False)
    assert "Unknown status color" in bad.output

    dup = run("status", "add", "--name", "on hold", ok=False)
    assert "already exists" in dup.output


def test_reports(shop):
    shop("order", "create", "--customer", "1", "--items", "1:1")
    sales = shop("report", "sales", "--period", "yearly").output
    assert "50.00" in sales

    low = shop("report", "low-stock").output
    assert "Product A" in low
    assert "Product B" not in low

    dashboard = shop("report", "dashboard").output
    assert "Total orders:    1" in dashboard


def test_invoice(shop):
    shop("settings", "update", "--name", "Bobbin Shop")
    shop("order", "create", "--customer", "1", "--items", "2:1", "--deposit", "5")
    invoice = shop("order", "invoice", "--id", "1").output
    assert invoice.startswith("Bobbin Shop")
    assert "Bill to:  123 Main St" in invoice
    assert "15.00" in invoice


def test_data_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("BACKOFFICE_DATA_DIR", str(tmp_path))
    result = CliRunner().invoke(cli, ["product", "add", "--name", "Mug", "--price", "3"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "products.json").exists()


def test_user_commands(shop):
    shop("user", "update", "--id", "1", "--phone", "555-1234", "--role", "staff")
    shown = shop("user", "show", "--id", "1").output
    assert "Customer One (staff)" in shown
    assert "Phone:   555-1234" in shown

    bad = shop("user", "update", "--id", "1", "--name", " ", ok=False)
    assert "User name is required" in bad.output

    missing = shop("user", "show", "--id", "42", ok=False)
    assert missing.exit_code == 1


def test_deleted_customer_orders_still_render(shop):
    shop("order", "create", "--customer", "1", "--items", "1:1")
    shop("user", "delete", "--id", "1", "--yes")

    assert "No users found." in shop("user", "list").output
    shown = shop("order", "show", "--id", "1").output
    assert "Customer: User ID: 1" in shown
    assert "User ID: 1" in shop("order", "list").output
