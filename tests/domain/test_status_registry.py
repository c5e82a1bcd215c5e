"""Unit tests for the StatusRegistry domain service."""

import pytest

from backoffice.domain.exceptions import NotFoundError, ValidationError
from backoffice.domain.model.order_status import StatusColor
from backoffice.domain.service.status_registry import StatusRegistry
from tests.fakes import FakeStatusRepository


def _registry() -> StatusRegistry:
    return StatusRegistry(FakeStatusRepository.with_defaults())


class TestList:

    def test_defaults_in_registry_order(self):
        names = [s.name for s in _registry().list()]
        assert names[0] == "Started"
        assert names[-1] == "Cancelled"
        assert len(names) == 6

    def test_first(self):
        assert _registry().first().name == "Started"

    def test_first_on_empty_registry_rejected(self):
        with pytest.raises(ValidationError, match="No order statuses"):
            StatusRegistry(FakeStatusRepository()).first()


class TestCreate:

    def test_create_appends(self):
        registry = _registry()
        created = registry.create("On Hold", "pink")
        assert created.color == StatusColor.PINK
        assert registry.list()[-1].name == "On Hold"

    def test_name_is_trimmed(self):
        assert _registry().create("  Packed ", "gray").name == "Packed"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            _registry().create(name, "gray")

    @pytest.mark.parametrize("name", ["Started", "started", " STARTED "])
    def test_duplicate_name_rejected(self, name):
        with pytest.raises(ValidationError, match="already exists"):
            _registry().create(name, "blue")

    def test_unknown_color_rejected(self):
        with pytest.raises(ValidationError, match="Unknown status color"):
            _registry().create("Packed", "orange")


class TestUpdate:

    def test_update_color_only(self):
        registry = _registry()
        updated = registry.update("1", color="green")
        assert updated.name == "Started"
        assert updated.color == StatusColor.GREEN

    def test_rename_to_same_name_allowed(self):
        assert _registry().update("1", name="started").name == "started"

    def test_rename_onto_other_status_rejected(self):
        registry = _registry()
        with pytest.raises(ValidationError, match="already exists"):
            registry.update("1", name="Completed")
        assert registry.get("1").name == "Started"

    def test_bad_color_leaves_name_untouched(self):
        registry = _registry()
        with pytest.raises(ValidationError):
            registry.update("1", name="Begun", color="orange")
        assert registry.get("1").name == "Started"

    def test_unknown_id_rejected(self):
        with pytest.raises(NotFoundError):
            _registry().update("99", name="Whatever")


class TestDelete:

    def test_delete_removes(self):
        registry = _registry()
        registry.delete("6")
        assert "Cancelled" not in [s.name for s in registry.list()]

    def test_delete_unknown_rejected(self):
        with pytest.raises(NotFoundError):
            _registry().delete("99")
