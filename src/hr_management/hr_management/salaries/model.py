from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import as_number


@dataclass(frozen=True)
class Salary:
    salary_id: Optional[str]
    employee_id: Any
    base_salary: float = 0
    bonus: float = 0
    month: str = ""

    @property
    def total(self) -> float:
        return self.base_salary + self.bonus

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Salary":
        return cls(
            salary_id=str(data["id"]) if data.get("id") is not None else None,
            employee_id=data.get("employeeId"),
            base_salary=as_number(data.get("baseSalary")),
            bonus=as_number(data.get("bonus")),
            month=data.get("month") or "",
        )
