from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

Record = dict[str, Any]


class RecordStore(Protocol):
    """Storage contract for one collection of flat records.

    Note: entity repositories depend on this interface, never on a concrete
    file or HTTP backend.
    """

    name: str

    def list(self) -> Sequence[Record]:
        raise NotImplementedError

    def get(self, record_id: Any) -> Optional[Record]:
        raise NotImplementedError

    def create(self, fields: Mapping[str, Any]) -> Record:
        raise NotImplementedError

    def update(self, record_id: Any, fields: Mapping[str, Any]) -> Optional[Record]:
        """Shallow-merge ``fields`` over the stored record; the stored id always wins."""

        raise NotImplementedError

    def delete(self, record_id: Any) -> bool:
        """Remove the record; deleting an unknown id is a successful no-op."""

        raise NotImplementedError
