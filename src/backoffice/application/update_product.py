"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from backoffice.application.dto import ProductDTO
from backoffice.application.mappers import product_to_dto
from backoffice.domain.exceptions import NotFoundError, ValidationError
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | int | float | None = None,
        stock_quantity: int | None = None,
    ) -> ProductDTO:
        """Edit a catalog entry.

        Repricing does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        new_price = Money.of(price) if price is not None else None
        if name is not None and name.strip():
            clash = self._product_repo.get_by_name(name.strip())
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")

        product.edit(
            name=name,
            description=description,
            price=new_price,
            stock_quantity=stock_quantity,
        )
        self._product_repo.save(product)
        logger.info("product_updated", product_id=product_id)
        return product_to_dto(product)
