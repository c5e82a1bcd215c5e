"""Application services: Order Ledger update use cases.

Status and payment are the only mutable parts of an order.  Each handler
loads the order, applies the change on the aggregate (which validates
before mutating) and saves it back.  A rejected change is never saved.
"""

from __future__ import annotations

import structlog

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.order import Order
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


def _load(order_repo: OrderRepository, order_id: str) -> Order:
    order = order_repo.get_by_id(order_id)
    if order is None:
        raise NotFoundError(f"Order #{order_id} not found")
    return order


class SetOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, new_status: str) -> None:
        """Replace the order's status label.

        The label is not checked against the status registry; orders may
        carry labels that were later renamed or deleted.
        """
        order = _load(self._order_repo, order_id)
        previous = order.status
        order.set_status(new_status)
        self._order_repo.save(order)
        logger.info(
            "order_status_changed", order_id=order_id, old=previous, new=order.status
        )


class RecordPaymentHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, amount_paid: str | int | float) -> None:
        """Set the total amount paid so far (absolute, not an increment)."""
        amount = Money.of(amount_paid)
        order = _load(self._order_repo, order_id)
        order.record_payment(amount)
        self._order_repo.save(order)
        logger.info(
            "payment_recorded",
            order_id=order_id,
            amount_paid=order.amount_paid.formatted,
            remaining=order.remaining.formatted,
        )


class UpdateOrderHandler:
    """Edit status and payment together, as the order edit form does."""

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: str,
        status: str | None = None,
        amount_paid: str | int | float | None = None,
    ) -> None:
        amount = Money.of(amount_paid) if amount_paid is not None else None
        order = _load(self._order_repo, order_id)
        order.edit(status=status, amount_paid=amount)
        self._order_repo.save(order)
        logger.info(
            "order_updated",
            order_id=order_id,
            status=order.status,
            amount_paid=order.amount_paid.formatted,
        )
