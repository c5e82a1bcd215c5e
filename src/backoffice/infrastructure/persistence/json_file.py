"""Shared file handling for the JSON-backed repositories.

Each repository owns one JSON file holding a list of records.  The file
is re-read on every call, so separate processes see each other's writes
(last write wins).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path


class JsonListFile:

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(seed or [])

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, seed: list[dict]) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw(seed)

    # --- Record helpers -------------------------------------------------------

    def _next_id(self) -> str:
        """Sequential IDs for human use; other stores may hand out anything."""
        numeric = [int(r["id"]) for r in self._load_raw() if str(r["id"]).isdigit()]
        return str(max(numeric, default=0) + 1)

    def _upsert(self, record: dict) -> None:
        """Replace the record with the same ID in place, or append it."""
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self._persist_raw(records)

    def _remove(self, record_id: str) -> None:
        records = [r for r in self._load_raw() if r["id"] != record_id]
        self._persist_raw(records)

    def _find(self, record_id: str) -> dict | None:
        for raw in self._load_raw():
            if raw["id"] == record_id:
                return raw
        return None


def parse_timestamp(value: str) -> datetime:
    """Read an ISO-8601 timestamp, treating naive values as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
