"""Users of the back office, including the customers orders belong to."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from backoffice.domain.exceptions import ValidationError


class UserRole(Enum):
    ADMIN = "admin"
    STAFF = "staff"
    CUSTOMER = "customer"
    ACCOUNTANT = "accountant"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    SALES = "sales"
    PRODUCER = "producer"


@dataclass
class User:
    id: str | None
    name: str
    role: UserRole = UserRole.CUSTOMER
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        role: str | UserRole = UserRole.CUSTOMER,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> User:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        return User(
            id=None,
            name=name.strip(),
            role=_parse_role(role),
            email=email,
            phone=phone,
            address=address,
        )

    def edit(
        self,
        name: str | None = None,
        role: str | UserRole | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Apply a profile edit; nothing changes unless every field is valid.

        An empty string clears a contact field.
        """
        if name is not None and not name.strip():
            raise ValidationError("User name is required")
        new_role = _parse_role(role) if role is not None else None

        if name is not None:
            self.name = name.strip()
        if new_role is not None:
            self.role = new_role
        if email is not None:
            self.email = email.strip() or None
        if phone is not None:
            self.phone = phone.strip() or None
        if address is not None:
            self.address = address.strip() or None

    @property
    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER


def _parse_role(role: str | UserRole) -> UserRole:
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(str(role).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown user role {role!r}") from None
