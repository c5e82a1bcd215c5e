"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import DEFAULT_CURRENCY, Money
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.infrastructure.persistence.json_file import JsonListFile, parse_timestamp


class JsonProductRepository(JsonListFile, ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return self._next_id()

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._find(product_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> Product | None:
        for product in self.list_all():
            if product.name.lower() == name.strip().lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._upsert(self._to_raw(product))

    def delete(self, product_id: str) -> None:
        self._remove(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_quantity": product.stock_quantity,
            "created_at": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            stock_quantity=raw.get("stock_quantity", 0),
            created_at=parse_timestamp(raw["created_at"]),
        )
