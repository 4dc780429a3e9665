from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import httpx

from ..core.constants import COLLECTION_FILES
from .json_store import JsonRecordStore
from .remote_store import RemoteRecordStore
from .repository import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class StorageConfig:
    data_dir: Path
    use_local_data_only: bool = True
    use_local_fallback: bool = True
    request_timeout: float = 10.0
    retry_attempts: int = 3
    external_apis: dict[str, str] = field(default_factory=dict)


class StoreFactory:
    """Opens one RecordStore per collection name.

    Note: stores are cached, so every repository of a collection shares the
    same in-memory copy.
    """

    def __init__(self, config: StorageConfig, *, transport: Optional[httpx.BaseTransport] = None):
        self._config = config
        self._transport = transport
        self._stores: dict[str, RecordStore] = {}

    def _local(self, collection: str) -> JsonRecordStore:
        filename = COLLECTION_FILES.get(collection, f"{collection}.json")
        return JsonRecordStore(Path(self._config.data_dir) / filename, name=collection)

    def open(self, collection: str) -> RecordStore:
        store = self._stores.get(collection)
        if store is not None:
            return store

        url = self._config.external_apis.get(collection)
        if self._config.use_local_data_only or not url:
            store = self._local(collection)
        else:
            logger.info("Collection %s is proxied to %s", collection, url)
            store = RemoteRecordStore(
                url,
                name=collection,
                timeout=self._config.request_timeout,
                retry_attempts=self._config.retry_attempts,
                fallback=self._local(collection) if self._config.use_local_fallback else None,
                transport=self._transport,
            )

        self._stores[collection] = store
        return store

    def close(self) -> None:
        """Close the HTTP clients of every proxied collection."""

        for store in self._stores.values():
            if isinstance(store, RemoteRecordStore):
                store.close()
