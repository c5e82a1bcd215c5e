"""Abstract repository for the single shop settings record."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.shop_info import ShopInfo


class ShopInfoRepository(ABC):

    @abstractmethod
    def get(self) -> ShopInfo:
        """Return the current settings (defaults if never saved)."""

    @abstractmethod
    def save(self, info: ShopInfo) -> None:
        """Replace the stored settings."""
