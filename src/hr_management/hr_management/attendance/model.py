from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus


def _text(value: Any) -> str:
    # stored records are not validated, so a number or list may sit in a text field
    return "" if value is None else str(value)


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance mark for one day."""

    attendance_id: Optional[str]
    employee_id: Any
    date: str
    status: str = AttendanceStatus.PRESENT.value

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            attendance_id=str(data["id"]) if data.get("id") is not None else None,
            employee_id=data.get("employeeId"),
            date=_text(data.get("date")),
            status=_text(data.get("status")) or AttendanceStatus.PRESENT.value,
        )
