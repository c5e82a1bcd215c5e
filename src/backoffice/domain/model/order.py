"""Order aggregate — the core of the ledger.

The Order is an aggregate root that owns its line items. Only status,
``amount_paid`` and the ``deleted`` flag change after creation; the items
and ``total_amount`` are frozen the moment the order is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderItem:
    """Captures the price snapshot of a product at order-creation time."""

    product_id: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    customer_id: str
    items: list[OrderItem]
    total_amount: Money
    status: str
    amount_paid: Money = field(default_factory=Money.zero)
    deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        items: list[OrderItem],
        status: str,
        deposit: Money,
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if customer_id is None or not str(customer_id).strip():
            raise ValidationError("Customer is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        status = _clean_status(status)

        total = Money.zero()
        for item in items:
            total = total + item.line_total

        _check_payment(deposit, total)

        return Order(
            id=None,
            customer_id=str(customer_id).strip(),
            items=list(items),
            total_amount=total,
            status=status,
            amount_paid=deposit,
            created_at=created_at or datetime.now(timezone.utc),
        )

    # --- Mutations ------------------------------------------------------------

    def set_status(self, new_status: str) -> None:
        """Replace the status label.

        Statuses are admin-configured, so there is no transition graph:
        any label may follow any other.
        """
        self.status = _clean_status(new_status)

    def record_payment(self, new_amount_paid: Money) -> None:
        """Set the total paid so far (absolute, not incremental)."""
        _check_payment(new_amount_paid, self.total_amount)
        self.amount_paid = new_amount_paid

    def edit(self, status: str | None = None, amount_paid: Money | None = None) -> None:
        """Change status and payment together; both are validated first."""
        new_status = _clean_status(status) if status is not None else self.status
        if amount_paid is not None:
            _check_payment(amount_paid, self.total_amount)
            self.amount_paid = amount_paid
        self.status = new_status

    def soft_delete(self) -> None:
        """Mark the order deleted. Deleting twice is a no-op."""
        self.deleted = True

    # --- Computed properties --------------------------------------------------

    @property
    def remaining(self) -> Money:
        return self.total_amount - self.amount_paid

    @property
    def is_paid(self) -> bool:
        return self.amount_paid >= self.total_amount


def _clean_status(status: str) -> str:
    if status is None or not str(status).strip():
        raise ValidationError("Order status is required")
    return str(status).strip()


def _check_payment(amount: Money, total: Money) -> None:
    if amount > total:
        raise ValidationError(
            f"Amount paid {amount} cannot exceed order total {total}"
        )


def newest_first(orders: list[Order]) -> list[Order]:
    """Sort by ``created_at`` descending; equal timestamps keep their input order."""
    return sorted(orders, key=lambda o: o.created_at, reverse=True)
