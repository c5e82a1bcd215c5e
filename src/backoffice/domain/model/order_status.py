"""Order statuses as configured by the shop admin.

A status is just a label with a display color. Orders copy the label as a
plain string, so editing or deleting a status never touches existing
orders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from backoffice.domain.exceptions import ValidationError


class StatusColor(Enum):
    GRAY = "gray"
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    INDIGO = "indigo"
    PURPLE = "purple"
    PINK = "pink"

    @staticmethod
    def parse(value: str | StatusColor) -> StatusColor:
        """Map a palette name to a color, rejecting anything else."""
        if isinstance(value, StatusColor):
            return value
        try:
            return StatusColor(str(value).strip().lower())
        except ValueError:
            palette = ", ".join(c.value for c in StatusColor)
            raise ValidationError(
                f"Unknown status color {value!r} (expected one of: {palette})"
            ) from None


@dataclass
class OrderStatus:
    id: str | None
    name: str
    color: StatusColor = StatusColor.GRAY


DEFAULT_STATUSES: list[tuple[str, StatusColor]] = [
    ("Started", StatusColor.BLUE),
    ("First Layer Completed", StatusColor.INDIGO),
    ("Final Layer Applied", StatusColor.PURPLE),
    ("Ready to Ship", StatusColor.YELLOW),
    ("Completed", StatusColor.GREEN),
    ("Cancelled", StatusColor.RED),
]
