"""Application services: Order Ledger queries."""

from __future__ import annotations

from backoffice.application.dto import OrderDTO
from backoffice.application.mappers import OrderViewMapper
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.order import newest_first
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.user_repository import UserRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        return OrderViewMapper(self._user_repo, self._product_repo).to_dto(order)


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, include_deleted: bool = True) -> list[OrderDTO]:
        """All orders, newest first.

        Soft-deleted orders are included unless the caller opts out.
        """
        orders = newest_first(self._order_repo.list_all())
        if not include_deleted:
            orders = [o for o in orders if not o.deleted]
        mapper = OrderViewMapper(self._user_repo, self._product_repo)
        return [mapper.to_dto(o) for o in orders]
