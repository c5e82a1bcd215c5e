"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from backoffice.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from backoffice.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from backoffice.infrastructure.persistence.json_shop_info_repository import (
    JsonShopInfoRepository,
)
from backoffice.infrastructure.persistence.json_status_repository import (
    JsonStatusRepository,
)
from backoffice.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

DATA_DIR_ENV = "BACKOFFICE_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | None = None) -> Path:
    if override is not None:
        return Path(override)
    env = os.environ.get(DATA_DIR_ENV)
    return Path(env) if env else _DEFAULT_DATA_DIR


def product_repository(directory: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(data_dir(directory) / "products.json")


def order_repository(directory: Path | None = None) -> JsonOrderRepository:
    return JsonOrderRepository(data_dir(directory) / "orders.json")


def status_repository(directory: Path | None = None) -> JsonStatusRepository:
    return JsonStatusRepository(data_dir(directory) / "statuses.json")


def user_repository(directory: Path | None = None) -> JsonUserRepository:
    return JsonUserRepository(data_dir(directory) / "users.json")


def shop_info_repository(directory: Path | None = None) -> JsonShopInfoRepository:
    return JsonShopInfoRepository(data_dir(directory) / "shop.json")
