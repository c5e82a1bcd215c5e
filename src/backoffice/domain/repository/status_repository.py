"""Abstract repository for the order status registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.order_status import OrderStatus


class StatusRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique status ID."""

    @abstractmethod
    def get_by_id(self, status_id: str) -> OrderStatus | None:
        """Return a status by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[OrderStatus]:
        """Return every status in registry order."""

    @abstractmethod
    def save(self, status: OrderStatus) -> None:
        """Persist a new or updated status, keeping its registry position."""

    @abstractmethod
    def delete(self, status_id: str) -> None:
        """Remove a status from the registry."""
