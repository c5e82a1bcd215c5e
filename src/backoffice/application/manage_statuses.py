"""Application services: Status Registry use cases."""

from __future__ import annotations

from backoffice.application.dto import StatusDTO
from backoffice.application.mappers import status_to_dto
from backoffice.domain.repository.status_repository import StatusRepository
from backoffice.domain.service.status_registry import StatusRegistry


class ListStatusesHandler:

    def __init__(self, status_repo: StatusRepository) -> None:
        self._registry = StatusRegistry(status_repo)

    def handle(self) -> list[StatusDTO]:
        return [status_to_dto(s) for s in self._registry.list()]


class CreateStatusHandler:

    def __init__(self, status_repo: StatusRepository) -> None:
        self._registry = StatusRegistry(status_repo)

    def handle(self, name: str, color: str) -> StatusDTO:
        return status_to_dto(self._registry.create(name, color))


class UpdateStatusHandler:

    def __init__(self, status_repo: StatusRepository) -> None:
        self._registry = StatusRegistry(status_repo)

    def handle(
        self,
        status_id: str,
        name: str | None = None,
        color: str | None = None,
    ) -> StatusDTO:
        return status_to_dto(self._registry.update(status_id, name=name, color=color))


class DeleteStatusHandler:
    """Remove a status. Orders already carrying its name keep the label."""

    def __init__(self, status_repo: StatusRepository) -> None:
        self._registry = StatusRegistry(status_repo)

    def handle(self, status_id: str) -> None:
        self._registry.delete(status_id)
