from __future__ import annotations

import math
from collections import Counter
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository


def percent(count: int, total: int) -> int:
    """``count/total`` as a whole percentage, halves rounded up."""
    if total <= 0:
        return 0
    return int(math.floor(100 * count / total + 0.5))


def attendance_rate(records: Sequence[Mapping[str, Any]]) -> dict[str, int]:
    """Share of Present, Late and Absent marks, in percent.

    An empty input gives all zeros.
    """
    total = len(records)
    counts = Counter(AttendanceRecord.from_record(r).status for r in records)
    return {
        "present": percent(counts[AttendanceStatus.PRESENT.value], total),
        "late": percent(counts[AttendanceStatus.LATE.value], total),
        "absent": percent(counts[AttendanceStatus.ABSENT.value], total),
    }


def absence_trend(records: Sequence[Mapping[str, Any]]) -> list[dict]:
    """Number of Absent marks per date, oldest date first."""
    per_date: Counter[str] = Counter()
    for r in records:
        rec = AttendanceRecord.from_record(r)
        if rec.status == AttendanceStatus.ABSENT:
            per_date[rec.date] += 1
    return [{"date": d, "count": per_date[d]} for d in sorted(per_date)]


def filter_attendance(records: Sequence[Mapping[str, Any]], args: Mapping[str, str]) -> list[Mapping[str, Any]]:
    day = args.get("date")
    status = args.get("status")
    out = []
    for r in records:
        rec = AttendanceRecord.from_record(r)
        if day and rec.date != day:
            continue
        if status and rec.status != status:
            continue
        out.append(r)
    return out


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def _records(self, employee_id: Optional[Any]) -> Sequence[Mapping[str, Any]]:
        if employee_id is None:
            return self._attendance.list_all()
        return self._attendance.list_by_employee(employee_id)

    def get_rate(self, *, employee_id: Optional[Any] = None) -> dict[str, int]:
        return attendance_rate(self._records(employee_id))

    def get_absence_trend(self, *, employee_id: Optional[Any] = None) -> list[dict]:
        return absence_trend(self._records(employee_id))
