"""Domain service: Report Aggregator.

Reduces the order and product collections into the figures shown on the
reports page and the dashboard.  Sales are gross bookings: the sum of
``total_amount`` over orders that are not soft-deleted, never the cash
collected.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.order import Order, newest_first
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.user_repository import UserRepository

LOW_STOCK_THRESHOLD = 10
DAILY_WINDOW_DAYS = 7


class SalesPeriod(Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @staticmethod
    def parse(value: str | SalesPeriod) -> SalesPeriod:
        if isinstance(value, SalesPeriod):
            return value
        try:
            return SalesPeriod(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Unknown report period {value!r} (expected daily, monthly or yearly)"
            ) from None


@dataclass(frozen=True)
class SalesBucket:
    period: str
    total_sales: Money
    order_count: int = 0


@dataclass(frozen=True)
class DashboardSummary:
    users: int
    customers: int
    products: int
    orders: int
    cash_collected: Money


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _order_day(order: Order) -> date:
    created = order.created_at
    if created.tzinfo is not None:
        created = created.astimezone(timezone.utc)
    return created.date()


class ReportAggregator:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository | None = None,
        today: Callable[[], date] = _utc_today,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._today = today

    def sales_by_period(
        self,
        period: str | SalesPeriod,
        today: date | None = None,
    ) -> list[SalesBucket]:
        """Sum order totals per day, month or year.

        Every bucket in the report window is present, with zero sales
        where nothing was ordered:

        - daily: the last seven days up to and including *today*
        - monthly: the twelve months of *today*'s year
        - yearly: from the year of the oldest order through *today*'s year

        Orders falling outside the window are ignored.
        """
        period = SalesPeriod.parse(period)
        today = today or self._today()
        orders = [o for o in self._order_repo.list_all() if not o.deleted]

        if period == SalesPeriod.DAILY:
            labels = [
                (today - timedelta(days=offset)).isoformat()
                for offset in range(DAILY_WINDOW_DAYS - 1, -1, -1)
            ]

            def key(day: date) -> str:
                return day.isoformat()

        elif period == SalesPeriod.MONTHLY:
            labels = [f"{today.year}-{month:02d}" for month in range(1, 13)]

            def key(day: date) -> str:
                return f"{day.year}-{day.month:02d}"

        else:
            first_year = min(
                (_order_day(o).year for o in orders), default=today.year
            )
            first_year = min(first_year, today.year)
            labels = [str(year) for year in range(first_year, today.year + 1)]

            def key(day: date) -> str:
                return str(day.year)

        totals: dict[str, Money] = {label: Money.zero() for label in labels}
        counts: dict[str, int] = {label: 0 for label in labels}
        for order in orders:
            label = key(_order_day(order))
            if label not in totals:
                continue
            totals[label] = totals[label] + order.total_amount
            counts[label] += 1

        return [
            SalesBucket(period=label, total_sales=totals[label], order_count=counts[label])
            for label in labels
        ]

    def low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
        """Products whose stock is strictly below *threshold*."""
        return [
            p for p in self._product_repo.list_all() if p.stock_quantity < threshold
        ]

    def transaction_history(self) -> list[Order]:
        """Every order, soft-deleted included, newest first."""
        return newest_first(self._order_repo.list_all())

    def dashboard(self) -> DashboardSummary:
        orders = self._order_repo.list_all()
        users = self._user_repo.list_all() if self._user_repo is not None else []

        cash = Money.zero()
        for order in orders:
            if not order.deleted:
                cash = cash + order.amount_paid

        return DashboardSummary(
            users=len(users),
            customers=sum(1 for u in users if u.is_customer),
            products=len(self._product_repo.list_all()),
            orders=len(orders),
            cash_collected=cash,
        )
