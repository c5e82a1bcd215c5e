"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup, status registry default, Order creation).
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import structlog

from backoffice.application.dto import OrderDTO, OrderLineSpec
from backoffice.application.mappers import OrderViewMapper
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.status_repository import StatusRepository
from backoffice.domain.repository.user_repository import UserRepository
from backoffice.domain.service.order_builder import OrderBuilder
from backoffice.domain.service.status_registry import StatusRegistry

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        status_repo: StatusRepository,
        user_repo: UserRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._status_repo = status_repo
        self._user_repo = user_repo
        self._builder = (
            OrderBuilder(product_repo, clock) if clock else OrderBuilder(product_repo)
        )

    def handle(
        self,
        customer_id: str,
        lines: list[OrderLineSpec],
        deposit: str | int | float = "0",
        initial_status: str | None = None,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Pick the initial status (first registry entry unless given).
        2. Let the OrderBuilder resolve products, merge duplicate lines,
           snapshot prices and validate the deposit.
        3. Persist and return a DTO.
        """
        if initial_status is None:
            initial_status = StatusRegistry(self._status_repo).first().name

        order = self._builder.build(
            customer_id=customer_id,
            lines=[(line.product_id, line.quantity) for line in lines],
            initial_status=initial_status,
            deposit=Money.of(deposit),
        )
        order.id = self._order_repo.next_id()
        self._order_repo.save(order)

        logger.info(
            "order_created",
            order_id=order.id,
            customer_id=order.customer_id,
            total=order.total_amount.formatted,
            deposit=order.amount_paid.formatted,
            items=len(order.items),
        )
        return OrderViewMapper(self._user_repo, self._product_repo).to_dto(order)
