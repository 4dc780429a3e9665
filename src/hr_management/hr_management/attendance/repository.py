from __future__ import annotations

from ..storage.entity_repository import EmployeeOwnedRepository


class AttendanceRepository(EmployeeOwnedRepository):
    pass
