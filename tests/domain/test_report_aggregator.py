"""Unit tests for the ReportAggregator domain service."""

from datetime import date, datetime, timedelta, timezone

import pytest

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.model.product import Product
from backoffice.domain.model.user import User, UserRole
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.service.report_aggregator import ReportAggregator, SalesPeriod
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository

TODAY = date(2024, 6, 15)


def _order(total: str, when: datetime, paid: str = "0", deleted: bool = False) -> Order:
    order = Order.create(
        customer_id="1",
        items=[OrderItem("P", Quantity(1), Money.of(total))],
        status="Started",
        deposit=Money.of(paid),
        created_at=when,
    )
    if deleted:
        order.soft_delete()
    return order


def _at(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def _aggregator(orders=(), products=(), users=()) -> ReportAggregator:
    return ReportAggregator(
        FakeOrderRepository(list(orders)),
        FakeProductRepository(list(products)),
        FakeUserRepository(list(users)),
        today=lambda: TODAY,
    )


def _as_dict(buckets) -> dict[str, str]:
    return {b.period: b.total_sales.formatted for b in buckets}


class TestSalesByPeriod:

    def test_monthly_has_twelve_zero_filled_buckets(self):
        agg = _aggregator([
            _order("100", _at(2024, 1, 10)),
            _order("50", _at(2024, 1, 20)),
            _order("30", _at(2024, 6, 1)),
        ])
        buckets = agg.sales_by_period("monthly")
        assert [b.period for b in buckets] == [f"2024-{m:02d}" for m in range(1, 13)]
        totals = _as_dict(buckets)
        assert totals["2024-01"] == "150.00"
        assert totals["2024-06"] == "30.00"
        assert totals["2024-03"] == "0.00"
        assert buckets[0].order_count == 2

    def test_sums_total_amount_not_amount_paid(self):
        agg = _aggregator([_order("100", _at(2024, 6, 15), paid="10")])
        assert _as_dict(agg.sales_by_period(SalesPeriod.MONTHLY))["2024-06"] == "100.00"

    def test_deleted_orders_excluded(self):
        agg = _aggregator([
            _order("100", _at(2024, 6, 15)),
            _order("40", _at(2024, 6, 15), deleted=True),
        ])
        assert _as_dict(agg.sales_by_period("daily"))["2024-06-15"] == "100.00"

    def test_daily_covers_last_seven_days(self):
        agg = _aggregator([
            _order("10", _at(2024, 6, 8)),  # outside the seven-day window
            _order("20", _at(2024, 6, 10)),
            _order("30", _at(2024, 6, 15, 23, 59)),
        ])
        buckets = agg.sales_by_period("daily")
        assert [b.period for b in buckets] == [
            "2024-06-09", "2024-06-10", "2024-06-11", "2024-06-12",
            "2024-06-13", "2024-06-14", "2024-06-15",
        ]
        totals = _as_dict(buckets)
        assert totals["2024-06-10"] == "20.00"
        assert totals["2024-06-15"] == "30.00"
        assert sum(b.order_count for b in buckets) == 2

    def test_yearly_spans_oldest_order_to_today(self):
        agg = _aggregator([
            _order("100", _at(2021, 3, 1)),
            _order("200", _at(2024, 1, 1)),
        ])
        totals = _as_dict(agg.sales_by_period("yearly"))
        assert totals == {
            "2021": "100.00",
            "2022": "0.00",
            "2023": "0.00",
            "2024": "200.00",
        }

    def test_yearly_without_orders_is_current_year(self):
        assert _as_dict(_aggregator().sales_by_period("yearly")) == {"2024": "0.00"}

    def test_explicit_today_overrides_clock(self):
        agg = _aggregator([_order("100", _at(2023, 2, 1))])
        totals = _as_dict(agg.sales_by_period("monthly", today=date(2023, 12, 31)))
        assert totals["2023-02"] == "100.00"

    def test_non_utc_timestamps_bucket_by_utc_day(self):
        cairo = timezone(timedelta(hours=2))
        late = datetime(2024, 6, 15, 1, 0, tzinfo=cairo)  # 14 June in UTC
        agg = _aggregator([_order("100", late)])
        assert _as_dict(agg.sales_by_period("daily"))["2024-06-14"] == "100.00"

    def test_unknown_period_rejected(self):
        with pytest.raises(ValidationError, match="Unknown report period"):
            _aggregator().sales_by_period("weekly")


class TestLowStock:

    def test_strictly_below_default_threshold(self):
        agg = _aggregator(products=[
            Product(id="1", name="Nine", price=Money.of("1"), stock_quantity=9),
            Product(id="2", name="Ten", price=Money.of("1"), stock_quantity=10),
            Product(id="3", name="Zero", price=Money.of("1"), stock_quantity=0),
        ])
        assert [p.name for p in agg.low_stock()] == ["Nine", "Zero"]

    def test_custom_threshold(self):
        agg = _aggregator(products=[
            Product(id="1", name="Ten", price=Money.of("1"), stock_quantity=10),
        ])
        assert [p.name for p in agg.low_stock(threshold=11)] == ["Ten"]


class TestTransactionHistory:

    def test_includes_deleted_newest_first(self):
        old = _order("10", _at(2024, 1, 1))
        new = _order("20", _at(2024, 5, 1), deleted=True)
        history = _aggregator([old, new]).transaction_history()
        assert history == [new, old]
        assert history[0].deleted


class TestDashboard:

    def test_counts_and_cash_collected(self):
        agg = _aggregator(
            orders=[
                _order("100", _at(2024, 1, 1), paid="40"),
                _order("50", _at(2024, 1, 2), paid="50"),
                _order("80", _at(2024, 1, 3), paid="80", deleted=True),
            ],
            products=[Product(id="1", name="X", price=Money.of("1"))],
            users=[
                User(id=None, name="Admin", role=UserRole.ADMIN),
                User(id=None, name="Customer One"),
            ],
        )
        summary = agg.dashboard()
        assert summary.users == 2
        assert summary.customers == 1
        assert summary.products == 1
        assert summary.orders == 3
        assert summary.cash_collected == Money.of("90")
