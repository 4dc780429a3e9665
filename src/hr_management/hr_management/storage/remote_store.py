from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

import httpx

from ..core.exceptions import RemoteApiError
from .repository import Record, RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class RemoteRecordStore(RecordStore):
    """Collection proxied to an external REST API.

    Transport errors are retried up to ``retry_attempts`` times. When a
    ``fallback`` store is given, any failure is served from it instead.
    """

    def __init__(
        self,
        url: str,
        *,
        name: str,
        timeout: float = 10.0,
        retry_attempts: int = 3,
        fallback: Optional[RecordStore] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.name = name
        self._url = url.rstrip("/")
        self._retry_attempts = max(int(retry_attempts), 1)
        self._fallback = fallback
        self._client = httpx.Client(
            timeout=timeout,
            headers=dict(headers or DEFAULT_HEADERS),
            transport=transport,
        )

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        last_error: Optional[Exception] = None
        for attempt in range(1, self._retry_attempts + 1):
            logger.info("%s %s (attempt %d/%d)", method, url, attempt, self._retry_attempts)
            try:
                return self._client.request(method, url, **kwargs)
            except httpx.TransportError as e:
                last_error = e
                logger.warning("External API unreachable: %s", e)
        raise RemoteApiError(f"Failed to reach {url}: {last_error}")

    def _call(self, op: str, remote: Callable[[], T], local: Callable[[RecordStore], T]) -> T:
        try:
            return remote()
        except (RemoteApiError, httpx.HTTPStatusError, ValueError) as e:
            if self._fallback is None:
                logger.error("External API error on %s %s: %s", op, self.name, e)
                if isinstance(e, RemoteApiError):
                    raise
                raise RemoteApiError(f"Failed to {op} {self.name}: {e}") from e
            logger.info("External API unavailable, using local data for %s", self.name)
            return local(self._fallback)

    def list(self) -> Sequence[Record]:
        def remote() -> Sequence[Record]:
            resp = self._send("GET", self._url)
            resp.raise_for_status()
            return resp.json()

        return self._call("fetch", remote, lambda store: store.list())

    def get(self, record_id: Any) -> Optional[Record]:
        def remote() -> Optional[Record]:
            resp = self._send("GET", f"{self._url}/{record_id}")
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            return resp.json()

        return self._call("fetch", remote, lambda store: store.get(record_id))

    def create(self, fields: Mapping[str, Any]) -> Record:
        def remote() -> Record:
            resp = self._send("POST", self._url, json=dict(fields))
            resp.raise_for_status()
            return resp.json()

        return self._call("create", remote, lambda store: store.create(fields))

    def update(self, record_id: Any, fields: Mapping[str, Any]) -> Optional[Record]:
        def remote() -> Optional[Record]:
            resp = self._send("PUT", f"{self._url}/{record_id}", json=dict(fields))
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            return resp.json()

        return self._call("update", remote, lambda store: store.update(record_id, fields))

    def delete(self, record_id: Any) -> bool:
        def remote() -> bool:
            resp = self._send("DELETE", f"{self._url}/{record_id}")
            if resp.status_code == 404:
                return True
            resp.raise_for_status()
            return True

        return self._call("delete", remote, lambda store: store.delete(record_id))
