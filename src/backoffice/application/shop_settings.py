"""Application services: shop settings and invoices."""

from __future__ import annotations

import structlog

from backoffice.application.dto import InvoiceDTO, ShopInfoDTO
from backoffice.application.mappers import OrderViewMapper, shop_info_to_dto
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.shop_info_repository import ShopInfoRepository
from backoffice.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class ShowShopInfoHandler:

    def __init__(self, shop_repo: ShopInfoRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self) -> ShopInfoDTO:
        return shop_info_to_dto(self._shop_repo.get())


class UpdateShopInfoHandler:

    def __init__(self, shop_repo: ShopInfoRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, **changes: str) -> ShopInfoDTO:
        """Update the given settings; ``None`` values are left untouched."""
        changes = {k: v for k, v in changes.items() if v is not None}
        info = self._shop_repo.get().with_changes(**changes)
        self._shop_repo.save(info)
        logger.info("shop_info_updated", fields=sorted(changes))
        return shop_info_to_dto(info)


class ShowInvoiceHandler:
    """Everything needed to print an invoice for one order."""

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        shop_repo: ShopInfoRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._shop_repo = shop_repo

    def handle(self, order_id: str) -> InvoiceDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        mapper = OrderViewMapper(self._user_repo, self._product_repo)
        customer = mapper.customer(order)
        return InvoiceDTO(
            shop=shop_info_to_dto(self._shop_repo.get()),
            order=mapper.to_dto(order),
            customer_address=customer.address if customer is not None else None,
            customer_phone=customer.phone if customer is not None else None,
        )
