"""Application services: user directory.

Users matter to the ledger only as the customers orders point at; the
directory is what order views join against for display names.
"""

from __future__ import annotations

import structlog

from backoffice.application.dto import UserDTO
from backoffice.application.mappers import user_to_dto
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.user import User
from backoffice.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class AddUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        name: str,
        role: str = "customer",
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> UserDTO:
        user = User.create(name=name, role=role, email=email, phone=phone, address=address)
        user.id = self._user_repo.next_id()
        self._user_repo.save(user)
        logger.info("user_added", user_id=user.id, role=user.role.value)
        return user_to_dto(user)


class ListUsersHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, customers_only: bool = False) -> list[UserDTO]:
        users = self._user_repo.list_all()
        if customers_only:
            users = [u for u in users if u.is_customer]
        return [user_to_dto(u) for u in users]


class ShowUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID '{user_id}' not found")
        return user_to_dto(user)


class UpdateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        name: str | None = None,
        role: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID '{user_id}' not found")
        user.edit(name=name, role=role, email=email, phone=phone, address=address)
        self._user_repo.save(user)
        logger.info("user_updated", user_id=user_id, role=user.role.value)
        return user_to_dto(user)


class DeleteUserHandler:
    """Remove a user from the directory.

    Orders are left alone; views of a deleted customer's orders fall back
    to the bare customer ID.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> None:
        if self._user_repo.get_by_id(user_id) is None:
            raise NotFoundError(f"User with ID '{user_id}' not found")
        self._user_repo.delete(user_id)
        logger.info("user_deleted", user_id=user_id)
