from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: Optional[str]
    employee_id: Any
    start_date: str
    end_date: str
    type: str = LeaveType.VACATION.value
    status: str = LeaveStatus.PENDING.value
    reason: str = ""

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "LeaveRequest":
        return cls(
            leave_id=str(data["id"]) if data.get("id") is not None else None,
            employee_id=data.get("employeeId"),
            start_date=data.get("startDate") or "",
            end_date=data.get("endDate") or "",
            type=data.get("type") or LeaveType.VACATION.value,
            status=data.get("status") or LeaveStatus.PENDING.value,
            reason=data.get("reason") or "",
        )
