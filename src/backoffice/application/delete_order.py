"""Application service: Soft Delete Order use case.

Orders are never physically removed.  Deleting marks the order so
operational views can hide it while reports and history still show it.
"""

from __future__ import annotations

import structlog

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class SoftDeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        if order.deleted:
            logger.debug("order_already_deleted", order_id=order_id)
            return

        order.soft_delete()
        self._order_repo.save(order)
        logger.info("order_soft_deleted", order_id=order_id)
