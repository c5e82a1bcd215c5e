"""Domain service: Status Registry.

Keeps the admin-configurable list of order statuses.  Names are unique
(case-insensitive, ignoring surrounding whitespace) and colors come from
the fixed ``StatusColor`` palette.

Orders store their status as a plain string, so nothing here ever
cascades to existing orders.
"""

from __future__ import annotations

import structlog

from backoffice.domain.exceptions import NotFoundError, ValidationError
from backoffice.domain.model.order_status import OrderStatus, StatusColor
from backoffice.domain.repository.status_repository import StatusRepository

logger = structlog.get_logger(__name__)


class StatusRegistry:

    def __init__(self, status_repo: StatusRepository) -> None:
        self._status_repo = status_repo

    def list(self) -> list[OrderStatus]:
        return self._status_repo.list_all()

    def first(self) -> OrderStatus:
        """The status new orders start in when the caller does not pick one."""
        statuses = self._status_repo.list_all()
        if not statuses:
            raise ValidationError("No order statuses are configured")
        return statuses[0]

    def get(self, status_id: str) -> OrderStatus:
        status = self._status_repo.get_by_id(status_id)
        if status is None:
            raise NotFoundError(f"Status with ID '{status_id}' not found")
        return status

    def create(self, name: str, color: str | StatusColor) -> OrderStatus:
        clean_name = self._check_name(name)
        status = OrderStatus(
            id=self._status_repo.next_id(),
            name=clean_name,
            color=StatusColor.parse(color),
        )
        self._status_repo.save(status)
        logger.info("status_created", status_id=status.id, name=status.name)
        return status

    def update(
        self,
        status_id: str,
        name: str | None = None,
        color: str | StatusColor | None = None,
    ) -> OrderStatus:
        status = self.get(status_id)

        # Validate everything before touching the entity
        new_name = self._check_name(name, exclude_id=status.id) if name is not None else status.name
        new_color = StatusColor.parse(color) if color is not None else status.color

        status.name = new_name
        status.color = new_color
        self._status_repo.save(status)
        logger.info("status_updated", status_id=status.id, name=status.name)
        return status

    def delete(self, status_id: str) -> None:
        status = self.get(status_id)
        self._status_repo.delete(status_id)
        logger.info("status_deleted", status_id=status_id, name=status.name)

    # --- Internal helpers -----------------------------------------------------

    def _check_name(self, name: str, exclude_id: str | None = None) -> str:
        if not name or not name.strip():
            raise ValidationError("Status name is required")
        clean = name.strip()
        for existing in self._status_repo.list_all():
            if existing.id == exclude_id:
                continue
            if existing.name.strip().lower() == clean.lower():
                raise ValidationError(f"Status '{clean}' already exists")
        return clean
