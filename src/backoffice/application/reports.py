"""Application services: reporting queries."""

from __future__ import annotations

from datetime import date

from backoffice.application.dto import (
    DashboardDTO,
    OrderDTO,
    ProductDTO,
    SalesBucketDTO,
)
from backoffice.application.mappers import OrderViewMapper, product_to_dto
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.user_repository import UserRepository
from backoffice.domain.service.report_aggregator import (
    LOW_STOCK_THRESHOLD,
    ReportAggregator,
)


class _ReportHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._aggregator = ReportAggregator(order_repo, product_repo, user_repo)


class SalesReportHandler(_ReportHandler):

    def handle(self, period: str, today: date | None = None) -> list[SalesBucketDTO]:
        return [
            SalesBucketDTO(
                period=b.period,
                total_sales=b.total_sales.formatted,
                order_count=b.order_count,
            )
            for b in self._aggregator.sales_by_period(period, today=today)
        ]


class LowStockHandler(_ReportHandler):

    def handle(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._aggregator.low_stock(threshold)]


class TransactionHistoryHandler(_ReportHandler):

    def handle(self) -> list[OrderDTO]:
        mapper = OrderViewMapper(self._user_repo, self._product_repo)
        return [mapper.to_dto(o) for o in self._aggregator.transaction_history()]


class DashboardHandler(_ReportHandler):

    def handle(self) -> DashboardDTO:
        summary = self._aggregator.dashboard()
        return DashboardDTO(
            users=summary.users,
            customers=summary.customers,
            products=summary.products,
            orders=summary.orders,
            cash_collected=summary.cash_collected.formatted,
            currency=summary.cash_collected.currency,
        )
