"""Domain → DTO mapping shared by the query handlers.

Customer and product names on an order view are joined in here at read
time; they are never stored on the Order itself.
"""

from __future__ import annotations

from backoffice.application.dto import (
    OrderDTO,
    OrderItemDTO,
    ProductDTO,
    ShopInfoDTO,
    StatusDTO,
    UserDTO,
)
from backoffice.domain.model.order import Order
from backoffice.domain.model.order_status import OrderStatus
from backoffice.domain.model.product import Product
from backoffice.domain.model.shop_info import ShopInfo
from backoffice.domain.model.user import User
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.user_repository import UserRepository


class OrderViewMapper:
    """Maps orders to DTOs, memoising user and product lookups per instance."""

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._users: dict[str, User | None] = {}
        self._products: dict[str, Product | None] = {}

    def customer(self, order: Order) -> User | None:
        if order.customer_id not in self._users:
            self._users[order.customer_id] = self._user_repo.get_by_id(order.customer_id)
        return self._users[order.customer_id]

    def to_dto(self, order: Order) -> OrderDTO:
        customer = self.customer(order)
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_id=order.customer_id,
            customer_name=customer.name if customer is not None else None,
            status=order.status,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    product_name=self._product_name(item.product_id),
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.formatted,
                    line_total=item.line_total.formatted,
                )
                for item in order.items
            ],
            total_amount=order.total_amount.formatted,
            amount_paid=order.amount_paid.formatted,
            remaining=order.remaining.formatted,
            currency=order.total_amount.currency,
            deleted=order.deleted,
            created_at=order.created_at.isoformat(),
        )

    def _product_name(self, product_id: str) -> str | None:
        if product_id not in self._products:
            self._products[product_id] = self._product_repo.get_by_id(product_id)
        product = self._products[product_id]
        return product.name if product is not None else None


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=product.price.formatted,
        stock_quantity=product.stock_quantity,
        created_at=product.created_at.isoformat(),
    )


def status_to_dto(status: OrderStatus) -> StatusDTO:
    return StatusDTO(id=status.id, name=status.name, color=status.color.value)  # type: ignore[arg-type]


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,  # type: ignore[arg-type]
        name=user.name,
        role=user.role.value,
        email=user.email,
        phone=user.phone,
        address=user.address,
        created_at=user.created_at.isoformat(),
    )


def shop_info_to_dto(info: ShopInfo) -> ShopInfoDTO:
    return ShopInfoDTO(
        name=info.name,
        address=info.address,
        phone=info.phone,
        invoice_footer=info.invoice_footer,
    )
