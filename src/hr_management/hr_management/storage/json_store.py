from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import id_key, leading_int
from ..core.exceptions import StorageError
from .repository import Record, RecordStore

logger = logging.getLogger(__name__)


def load_collection(path: Path) -> list[Record]:
    """Read a JSON array file; a missing, unreadable or non-array file reads as empty."""

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Collection file %s not found, using an empty collection", path)
        return []
    except (OSError, ValueError) as e:
        logger.error("Error loading %s: %s", path, e)
        return []

    if not isinstance(data, list):
        logger.error("Collection file %s does not hold a JSON array", path)
        return []
    logger.debug("Loaded %d records from %s", len(data), path.name)
    return data


def save_collection(path: Path, records: Sequence[Record]) -> None:
    """Overwrite the whole file with ``records``."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(list(records), f, indent=2, ensure_ascii=False)
    except (OSError, TypeError, ValueError) as e:
        logger.error("Error saving %s: %s", path, e)
        raise StorageError(f"Failed to save {path.name}: {e}") from e
    logger.debug("Saved %d records to %s", len(records), path.name)


def next_id(records: Sequence[Record]) -> str:
    """``max(numeric ids) + 1`` as a string; ``"1"`` for an empty collection."""

    if not records:
        return "1"
    return str(max(leading_int(r.get("id")) for r in records) + 1)


class JsonRecordStore(RecordStore):
    """One collection held in memory and flushed wholesale to a JSON file.

    The file is read on first access. Every mutation builds the new collection,
    flushes it, and only then swaps it in, so a failed write leaves memory equal
    to what is on disk.
    """

    def __init__(self, path: Path | str, *, name: Optional[str] = None):
        self._path = Path(path)
        self.name = name or self._path.stem
        self._records: Optional[list[Record]] = None
        self._index: dict[str, Record] = {}

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_loaded(self) -> list[Record]:
        if self._records is None:
            self._swap(load_collection(self._path))
        return self._records

    def _swap(self, records: list[Record]) -> None:
        index: dict[str, Record] = {}
        for r in records:
            if not isinstance(r, dict) or r.get("id") is None:
                continue
            key = id_key(r["id"])
            if key in index:
                logger.warning("Duplicate id %s in %s, keeping the first record", key, self._path.name)
                continue
            index[key] = r
        self._records = records
        self._index = index

    def _commit(self, records: list[Record]) -> None:
        self.flush(records)
        self._swap(records)

    def flush(self, records: Optional[Sequence[Record]] = None) -> None:
        """Write ``records`` (default: the in-memory collection) to the file."""

        save_collection(self._path, self._ensure_loaded() if records is None else records)

    def reload(self) -> None:
        """Drop the in-memory copy; the next access re-reads the file."""

        self._records = None
        self._index = {}

    def list(self) -> Sequence[Record]:
        return [dict(r) if isinstance(r, dict) else r for r in self._ensure_loaded()]

    def get(self, record_id: Any) -> Optional[Record]:
        self._ensure_loaded()
        found = self._index.get(id_key(record_id))
        return dict(found) if found is not None else None

    def create(self, fields: Mapping[str, Any]) -> Record:
        records = self._ensure_loaded()
        new_id = next_id([r for r in records if isinstance(r, dict)])
        record = {"id": new_id, **{k: v for k, v in fields.items() if k != "id"}}
        self._commit([*records, record])
        logger.info("Created %s/%s", self.name, record["id"])
        return dict(record)

    def update(self, record_id: Any, fields: Mapping[str, Any]) -> Optional[Record]:
        records = self._ensure_loaded()
        current = self._index.get(id_key(record_id))
        if current is None:
            return None

        merged = {**current, **dict(fields), "id": current["id"]}
        self._commit([merged if r is current else r for r in records])
        logger.info("Updated %s/%s", self.name, merged["id"])
        return dict(merged)

    def delete(self, record_id: Any) -> bool:
        records = self._ensure_loaded()
        key = id_key(record_id)
        remaining = [r for r in records if not (isinstance(r, dict) and r.get("id") is not None and id_key(r["id"]) == key)]
        self._commit(remaining)
        if len(remaining) != len(records):
            logger.info("Deleted %s/%s", self.name, key)
        return True
