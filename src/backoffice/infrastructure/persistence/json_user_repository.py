"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from backoffice.domain.model.user import User, UserRole
from backoffice.domain.repository.user_repository import UserRepository
from backoffice.infrastructure.persistence.json_file import JsonListFile, parse_timestamp


class JsonUserRepository(JsonListFile, UserRepository):

    def next_id(self) -> str:
        return self._next_id()

    def get_by_id(self, user_id: str) -> User | None:
        raw = self._find(user_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = self.next_id()
        self._upsert(
            {
                "id": user.id,
                "name": user.name,
                "role": user.role.value,
                "email": user.email,
                "phone": user.phone,
                "address": user.address,
                "created_at": user.created_at.isoformat(),
            }
        )

    def delete(self, user_id: str) -> None:
        self._remove(user_id)

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            role=UserRole(raw.get("role", UserRole.CUSTOMER.value)),
            email=raw.get("email"),
            phone=raw.get("phone"),
            address=raw.get("address"),
            created_at=parse_timestamp(raw["created_at"]),
        )
