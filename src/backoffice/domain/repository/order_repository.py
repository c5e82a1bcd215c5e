"""Abstract repository for Order aggregate.

Orders are never removed, so there is deliberately no ``delete``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, soft-deleted ones included, in insertion order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
