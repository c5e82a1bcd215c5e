"""Shared setup for application-level tests."""

from datetime import datetime, timedelta, timezone

import pytest

from backoffice.domain.model.product import Product
from backoffice.domain.model.user import User, UserRole
from backoffice.domain.model.value_objects import Money
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeShopInfoRepository,
    FakeStatusRepository,
    FakeUserRepository,
)


class Repos:
    """Bundle of fresh in-memory repositories, pre-loaded with a small shop."""

    def __init__(self) -> None:
        self.products = FakeProductRepository([
            Product(id="A", name="Product A", price=Money.of("50.00"), stock_quantity=5),
            Product(id="B", name="Product B", price=Money.of("20.00"), stock_quantity=20),
        ])
        self.orders = FakeOrderRepository()
        self.statuses = FakeStatusRepository.with_defaults()
        self.users = FakeUserRepository([
            User(id=None, name="Admin User", role=UserRole.ADMIN),
            User(id=None, name="Customer One", address="123 Main St", phone="555-1234"),
        ])
        self.shop = FakeShopInfoRepository()


class SteppingClock:
    """Returns a strictly increasing timestamp on every call."""

    def __init__(self, start: datetime) -> None:
        self._current = start

    def __call__(self) -> datetime:
        value = self._current
        self._current += timedelta(minutes=1)
        return value


@pytest.fixture
def repos() -> Repos:
    return Repos()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2024, 6, 15, 10, 0, tzinfo=timezone.utc))
