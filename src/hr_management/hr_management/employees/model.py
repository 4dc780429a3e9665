from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain view of an employee record.

    Defaults follow the web client: a record without a status is Active.
    """

    employee_id: Optional[str]
    first_name: str
    last_name: str
    email: str = ""
    phone: str = ""
    department_id: Any = None
    hire_date: str = ""
    status: str = EmployeeStatus.ACTIVE.value
    picture: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            employee_id=str(data["id"]) if data.get("id") is not None else None,
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            email=data.get("email") or "",
            phone=data.get("phone") or "",
            department_id=data.get("departmentId"),
            hire_date=data.get("hireDate") or "",
            status=data.get("status") or EmployeeStatus.ACTIVE.value,
            picture=data.get("picture") or "",
        )
