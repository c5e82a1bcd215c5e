"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from backoffice.application.dto import ProductDTO
from backoffice.application.mappers import product_to_dto
from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str | int | float,
        description: str = "",
        stock_quantity: int = 0,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            price=Money.of(price),
            description=description,
            stock_quantity=stock_quantity,
        )

        if self._product_repo.get_by_name(product.name) is not None:
            raise ValidationError(f"Product '{product.name}' already exists")

        product.id = self._product_repo.next_id()
        self._product_repo.save(product)
        logger.info("product_added", product_id=product.id, name=product.name)
        return product_to_dto(product)
