"""Domain service: Order Builder.

Turns a customer id and a list of ``(product_id, quantity)`` lines into a
new Order, snapshotting the current catalog price onto every item.

Lines naming the same product are merged into a single item so one order
never carries two rows for the same product.  Every product is resolved
and every quantity validated before the Order is constructed, so a
failure leaves nothing behind.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone

import structlog

from backoffice.domain.exceptions import NotFoundError, ValidationError
from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderBuilder:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def build(
        self,
        customer_id: str,
        lines: Sequence[tuple[str, int]],
        initial_status: str,
        deposit: Money,
    ) -> Order:
        if customer_id is None or not str(customer_id).strip():
            raise ValidationError("Customer is required")
        if not lines:
            raise ValidationError("Order must contain at least one item")

        # Merge duplicates, keeping first-seen order
        merged: dict[str, Quantity] = {}
        for product_id, quantity in lines:
            qty = Quantity(quantity)
            if product_id in merged:
                merged[product_id] = merged[product_id] + qty
            else:
                merged[product_id] = qty

        items: list[OrderItem] = []
        for product_id, qty in merged.items():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product with ID '{product_id}' not found")
            items.append(
                OrderItem(
                    product_id=product.id,  # type: ignore[arg-type]
                    quantity=qty,
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        order = Order.create(
            customer_id=customer_id,
            items=items,
            status=initial_status,
            deposit=deposit,
            created_at=self._clock(),
        )

        if len(items) < len(lines):
            logger.debug(
                "order_lines_merged", requested=len(lines), merged=len(items)
            )
        return order
