"""JSON-file-backed implementation of ShopInfoRepository."""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from pathlib import Path

from backoffice.domain.model.shop_info import ShopInfo
from backoffice.domain.repository.shop_info_repository import ShopInfoRepository


class JsonShopInfoRepository(ShopInfoRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get(self) -> ShopInfo:
        if not self._file_path.exists():
            return ShopInfo()
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        known = {f.name for f in fields(ShopInfo)}
        return ShopInfo(**{k: v for k, v in raw.items() if k in known})

    def save(self, info: ShopInfo) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(asdict(info), indent=2) + "\n", encoding="utf-8"
        )
