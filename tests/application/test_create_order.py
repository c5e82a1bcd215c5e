"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.dto import OrderLineSpec
from backoffice.domain.exceptions import NotFoundError, ValidationError
from tests.fakes import FakeStatusRepository


def _handler(repos, clock=None) -> CreateOrderHandler:
    return CreateOrderHandler(repos.orders, repos.products, repos.statuses, repos.users, clock)


class TestCreateOrderHappyPath:

    def test_creates_order_with_correct_total(self, repos):
        dto = _handler(repos).handle(
            "2", [OrderLineSpec("A", 2), OrderLineSpec("B", 1)], deposit="30"
        )
        assert dto.total_amount == "120.00"
        assert dto.amount_paid == "30.00"
        assert dto.remaining == "90.00"
        assert dto.currency == "EGP"
        assert dto.customer_name == "Customer One"
        assert [i.product_name for i in dto.items] == ["Product A", "Product B"]

    def test_defaults_to_first_registry_status(self, repos):
        dto = _handler(repos).handle("2", [OrderLineSpec("A", 1)])
        assert dto.status == "Started"

    def test_explicit_initial_status(self, repos):
        dto = _handler(repos).handle("2", [OrderLineSpec("A", 1)], initial_status="Ready to Ship")
        assert dto.status == "Ready to Ship"

    def test_assigns_and_persists(self, repos):
        dto = _handler(repos).handle("2", [OrderLineSpec("A", 1)])
        saved = repos.orders.get_by_id(dto.id)
        assert saved is not None
        assert saved.customer_id == "2"

    def test_created_at_is_iso_8601(self, repos, clock):
        dto = _handler(repos, clock).handle("2", [OrderLineSpec("A", 1)])
        assert dto.created_at == "2024-06-15T10:00:00+00:00"

    def test_unknown_customer_still_accepted(self, repos):
        dto = _handler(repos).handle("42", [OrderLineSpec("A", 1)])
        assert dto.customer_name is None


class TestCreateOrderPriceLock:

    def test_price_snapshot_survives_repricing(self, repos):
        dto = _handler(repos).handle("2", [OrderLineSpec("A", 1)])

        product = repos.products.get_by_id("A")
        product.update_price(repos.products.get_by_id("B").price)
        repos.products.save(product)

        assert repos.orders.get_by_id(dto.id).total_amount.formatted == "50.00"


class TestCreateOrderValidation:

    def test_unknown_product_rejected_and_nothing_saved(self, repos):
        with pytest.raises(NotFoundError, match="not found"):
            _handler(repos).handle("2", [OrderLineSpec("A", 1), OrderLineSpec("Nope", 1)])
        assert repos.orders.list_all() == []

    def test_deposit_too_large_rejected_and_nothing_saved(self, repos):
        with pytest.raises(ValidationError, match="cannot exceed"):
            _handler(repos).handle("2", [OrderLineSpec("B", 1)], deposit="25")
        assert repos.orders.list_all() == []

    def test_negative_deposit_rejected(self, repos):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _handler(repos).handle("2", [OrderLineSpec("B", 1)], deposit="-1")

    def test_empty_registry_needs_explicit_status(self, repos):
        repos.statuses = FakeStatusRepository()
        with pytest.raises(ValidationError, match="No order statuses"):
            _handler(repos).handle("2", [OrderLineSpec("A", 1)])
