from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class AttendanceStatus(str, Enum):
    """Daily attendance mark stored on attendance records."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class LeaveType(str, Enum):
    VACATION = "Vacation"
    SICK = "Sick"
    PERSONAL = "Personal"


class LeaveStatus(str, Enum):
    """Leave request workflow status.

    Transitions are not guarded: any status may be set at any time.
    """

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
