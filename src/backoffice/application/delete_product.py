"""Application service: Delete Product use case.

Products are removed from the catalog outright.  Orders that reference
them keep their own price snapshot, so their totals are unaffected.
"""

from __future__ import annotations

import structlog

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        self._product_repo.delete(product_id)
        logger.info("product_deleted", product_id=product_id)
