"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is counted, products are added and removed from
the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``stock_quantity`` is informational: creating an order does not
    decrement it.
    """

    id: str | None
    name: str
    price: Money
    description: str = ""
    stock_quantity: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        price: Money,
        description: str = "",
        stock_quantity: int = 0,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        _check_stock(stock_quantity)
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            description=description.strip(),
            stock_quantity=stock_quantity,
        )

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price

    def edit(
        self,
        name: str | None = None,
        description: str | None = None,
        price: Money | None = None,
        stock_quantity: int | None = None,
    ) -> None:
        """Apply a catalog edit; nothing changes unless every field is valid."""
        if name is not None and not name.strip():
            raise ValidationError("Product name is required")
        if stock_quantity is not None:
            _check_stock(stock_quantity)

        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description.strip()
        if price is not None:
            self.update_price(price)
        if stock_quantity is not None:
            self.stock_quantity = stock_quantity


def _check_stock(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Stock quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Stock quantity cannot be negative")
