"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is rendered with
two fraction digits and timestamps as ISO-8601 strings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user.

    ``product_name`` is looked up at read time and is None once the
    product has been removed from the catalog.
    """

    product_id: str
    product_name: str | None
    quantity: int
    unit_price: str  # formatted, e.g. "50.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    customer_name: str | None
    status: str
    items: list[OrderItemDTO]
    total_amount: str
    amount_paid: str
    remaining: str
    currency: str
    deleted: bool
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str
    stock_quantity: int
    created_at: str


@dataclass(frozen=True)
class StatusDTO:
    id: str
    name: str
    color: str


@dataclass(frozen=True)
class UserDTO:
    id: str
    name: str
    role: str
    email: str | None
    phone: str | None
    address: str | None
    created_at: str


@dataclass(frozen=True)
class SalesBucketDTO:
    period: str
    total_sales: str
    order_count: int


@dataclass(frozen=True)
class DashboardDTO:
    users: int
    customers: int
    products: int
    orders: int
    cash_collected: str
    currency: str


@dataclass(frozen=True)
class ShopInfoDTO:
    name: str
    address: str
    phone: str
    invoice_footer: str


@dataclass(frozen=True)
class InvoiceDTO:
    shop: ShopInfoDTO
    order: OrderDTO
    customer_address: str | None
    customer_phone: str | None
