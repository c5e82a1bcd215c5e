"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from decimal import Decimal

from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.infrastructure.persistence.json_file import JsonListFile, parse_timestamp


class JsonOrderRepository(JsonListFile, OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return self._next_id()

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._find(order_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._upsert(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "status": order.status,
            "total_amount": str(order.total_amount.amount),
            "amount_paid": str(order.amount_paid.amount),
            "currency": order.total_amount.currency,
            "deleted": order.deleted,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        items = [
            OrderItem(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            status=raw["status"],
            amount_paid=Money(Decimal(raw.get("amount_paid", "0")), currency),
            deleted=raw.get("deleted", False),
            created_at=parse_timestamp(raw["created_at"]),
        )
