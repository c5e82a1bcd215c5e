"""Shop details printed on invoices."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from backoffice.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ShopInfo:
    name: str = "Yoyo Shop"
    address: str = "123 Yoyo Lane, String City, 98765"
    phone: str = "(123) 456-7890"
    invoice_footer: str = "Thank you for your business!"

    def with_changes(self, **changes: str) -> ShopInfo:
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ValidationError(f"Unknown shop setting(s): {', '.join(unknown)}")
        if "name" in changes and not (changes["name"] or "").strip():
            raise ValidationError("Shop name is required")
        return replace(self, **changes)
