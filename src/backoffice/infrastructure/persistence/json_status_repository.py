"""JSON-file-backed implementation of StatusRepository.

A fresh file is seeded with the default workflow statuses.
"""

from __future__ import annotations

from pathlib import Path

from backoffice.domain.model.order_status import DEFAULT_STATUSES, OrderStatus, StatusColor
from backoffice.domain.repository.status_repository import StatusRepository
from backoffice.infrastructure.persistence.json_file import JsonListFile


class JsonStatusRepository(JsonListFile, StatusRepository):

    def __init__(self, file_path: Path) -> None:
        seed = [
            {"id": str(i), "name": name, "color": color.value}
            for i, (name, color) in enumerate(DEFAULT_STATUSES, start=1)
        ]
        super().__init__(file_path, seed=seed)

    # --- StatusRepository interface -------------------------------------------

    def next_id(self) -> str:
        return self._next_id()

    def get_by_id(self, status_id: str) -> OrderStatus | None:
        raw = self._find(status_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[OrderStatus]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, status: OrderStatus) -> None:
        if status.id is None:
            status.id = self.next_id()
        self._upsert({"id": status.id, "name": status.name, "color": status.color.value})

    def delete(self, status_id: str) -> None:
        self._remove(status_id)

    @staticmethod
    def _to_domain(raw: dict) -> OrderStatus:
        return OrderStatus(id=raw["id"], name=raw["name"], color=StatusColor(raw["color"]))
