"""Abstract repository for users and customers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique user ID."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Remove a user. Orders keep pointing at the old ID."""
