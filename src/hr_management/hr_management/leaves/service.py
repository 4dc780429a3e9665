from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from .model import LeaveRequest


def leave_duration(start: date | str, end: date | str) -> int:
    """Inclusive number of days from ``start`` to ``end``.

    ``end`` before ``start`` is not rejected and gives zero or a negative count.
    """
    if isinstance(start, str):
        start = parse_iso_date(start)
    if isinstance(end, str):
        end = parse_iso_date(end)
    return (end - start).days + 1


def duration_of(record: Mapping[str, Any]) -> Optional[int]:
    """Duration of a stored leave, or None when a date is missing or malformed."""
    leave = LeaveRequest.from_record(record)
    try:
        return leave_duration(str(leave.start_date), str(leave.end_date))
    except (TypeError, ValueError):
        return None


def with_duration(records: Sequence[Mapping[str, Any]]) -> list[dict]:
    return [{**r, "duration": duration_of(r)} for r in records]


def pending_count(records: Sequence[Mapping[str, Any]]) -> int:
    return sum(1 for r in records if LeaveRequest.from_record(r).is_pending)


def filter_leaves(records: Sequence[Mapping[str, Any]], args: Mapping[str, str]) -> list[Mapping[str, Any]]:
    status = args.get("status")
    leave_type = args.get("type")
    out = []
    for r in records:
        leave = LeaveRequest.from_record(r)
        if status and leave.status != status:
            continue
        if leave_type and leave.type != leave_type:
            continue
        out.append(r)
    return out
