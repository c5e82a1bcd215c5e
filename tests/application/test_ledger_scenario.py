"""End-to-end walk through the ledger: build, pay, delete, report."""

import pytest

from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.delete_order import SoftDeleteOrderHandler
from backoffice.application.dto import OrderLineSpec
from backoffice.application.reports import SalesReportHandler, TransactionHistoryHandler
from backoffice.application.show_order import ShowOrderHandler
from backoffice.application.update_order import RecordPaymentHandler
from backoffice.domain.exceptions import ValidationError


def test_build_pay_delete_report(repos, clock):
    create = CreateOrderHandler(repos.orders, repos.products, repos.statuses, repos.users, clock)
    dto = create.handle("2", [OrderLineSpec("A", 2), OrderLineSpec("B", 1)], deposit="30")

    assert dto.total_amount == "120.00"
    assert dto.amount_paid == "30.00"
    assert len(dto.items) == 2

    pay = RecordPaymentHandler(repos.orders)
    with pytest.raises(ValidationError):
        pay.handle(dto.id, "150")
    pay.handle(dto.id, "120")

    show = ShowOrderHandler(repos.orders, repos.users, repos.products)
    assert show.handle(dto.id).remaining == "0.00"

    report = SalesReportHandler(repos.orders, repos.products, repos.users)
    today = clock().date()
    before = {b.period: b.total_sales for b in report.handle("daily", today=today)}
    assert before[today.isoformat()] == "120.00"

    SoftDeleteOrderHandler(repos.orders).handle(dto.id)

    after = {b.period: b.total_sales for b in report.handle("daily", today=today)}
    assert after[today.isoformat()] == "0.00"

    history = TransactionHistoryHandler(repos.orders, repos.products, repos.users).handle()
    assert [(o.id, o.deleted) for o in history] == [(dto.id, True)]
