from __future__ import annotations

from typing import Any, Sequence

from ..storage.entity_repository import EntityRepository
from ..storage.repository import Record


class EmployeeRepository(EntityRepository):
    def list_by_department(self, department_id: Any) -> Sequence[Record]:
        return self.list_by("departmentId", department_id)
