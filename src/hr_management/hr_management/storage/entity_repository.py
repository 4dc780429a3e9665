from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.validators import same_id
from .repository import Record, RecordStore


class EntityRepository:
    """Thin per-entity accessor over a RecordStore.

    Subclasses only name their foreign keys and add entity-specific calls.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Record]:
        return self._store.list()

    def get_by_id(self, record_id: Any) -> Optional[Record]:
        return self._store.get(record_id)

    def create(self, fields: Mapping[str, Any]) -> Record:
        return self._store.create(fields)

    def update(self, record_id: Any, fields: Mapping[str, Any]) -> Optional[Record]:
        return self._store.update(record_id, fields)

    def delete_by_id(self, record_id: Any) -> bool:
        return self._store.delete(record_id)

    def list_by(self, field_name: str, value: Any) -> Sequence[Record]:
        """Records whose ``field_name`` equals ``value`` when both are compared as strings."""

        return [r for r in self.list_all() if isinstance(r, dict) and same_id(r.get(field_name), value)]


class EmployeeOwnedRepository(EntityRepository):
    """Repository for records that carry an ``employeeId`` weak reference."""

    foreign_key = "employeeId"

    def list_by_employee(self, employee_id: Any) -> Sequence[Record]:
        return self.list_by(self.foreign_key, employee_id)
