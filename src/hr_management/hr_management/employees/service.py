from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..attendance.service import attendance_rate
from ..common.validators import same_id
from ..core.exceptions import NotFoundError
from ..departments.repository import DepartmentRepository
from ..leaves.repository import LeaveRepository
from ..leaves.service import with_duration
from ..salaries.repository import SalaryRepository
from ..salaries.service import with_total
from .model import Employee
from .repository import EmployeeRepository


def search_employees(records: Sequence[Mapping[str, Any]], term: Optional[str]) -> list[Mapping[str, Any]]:
    """Case-insensitive match on first name, last name or email."""
    if not term:
        return list(records)
    term = term.lower()
    out = []
    for r in records:
        e = Employee.from_record(r)
        if term in str(e.first_name).lower() or term in str(e.last_name).lower() or term in str(e.email).lower():
            out.append(r)
    return out


def filter_by_department(records: Sequence[Mapping[str, Any]], department_id: Any) -> list[Mapping[str, Any]]:
    if not department_id:
        return list(records)
    return [r for r in records if same_id(r.get("departmentId"), department_id)]


def filter_by_status(records: Sequence[Mapping[str, Any]], status: Optional[str]) -> list[Mapping[str, Any]]:
    if not status:
        return list(records)
    return [r for r in records if Employee.from_record(r).status == status]


def _sort_key(value: Any) -> tuple:
    # numbers before strings, missing values last
    if value is None:
        return (2, "")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value))


def sort_records(records: Sequence[Mapping[str, Any]], field: str, order: str = "asc") -> list[Mapping[str, Any]]:
    return sorted(records, key=lambda r: _sort_key(r.get(field)), reverse=(order == "desc"))


def filter_employees(records: Sequence[Mapping[str, Any]], args: Mapping[str, str]) -> list[Mapping[str, Any]]:
    out = search_employees(records, args.get("search"))
    out = filter_by_department(out, args.get("departmentId"))
    out = filter_by_status(out, args.get("status"))
    if args.get("sortBy"):
        out = sort_records(out, args["sortBy"], args.get("order", "asc"))
    return out


class EmployeeService:
    """Cross-entity reads centred on one employee."""

    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        salaries: SalaryRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
    ):
        self._employees = employees
        self._departments = departments
        self._salaries = salaries
        self._attendance = attendance
        self._leaves = leaves

    def department_name(self, employee: Mapping[str, Any]) -> Optional[str]:
        """Name of the employee's department, or None for a dangling reference."""
        department_id = employee.get("departmentId")
        if department_id is None:
            return None
        department = self._departments.get_by_id(department_id)
        return department.get("name") if department else None

    def get_profile(self, employee_id: Any) -> dict:
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")

        department_id = employee.get("departmentId")
        department = self._departments.get_by_id(department_id) if department_id is not None else None
        attendance = self._attendance.list_by_employee(employee_id)

        return {
            "employee": employee,
            "fullName": Employee.from_record(employee).full_name,
            "department": department,
            "departmentName": department.get("name") if department else None,
            "salaries": with_total(self._salaries.list_by_employee(employee_id)),
            "attendance": list(attendance),
            "attendanceRate": attendance_rate(attendance),
            "leaves": with_duration(self._leaves.list_by_employee(employee_id)),
        }
