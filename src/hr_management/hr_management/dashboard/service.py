from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..attendance.repository import AttendanceRepository
from ..attendance.service import absence_trend, attendance_rate
from ..common.validators import same_id
from ..departments.model import Department
from ..departments.repository import DepartmentRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..leaves.service import pending_count
from ..salaries.repository import SalaryRepository
from ..salaries.service import salary_distribution


def employees_per_department(
    employees: Sequence[Mapping[str, Any]],
    departments: Sequence[Mapping[str, Any]],
) -> list[dict]:
    """Head count per department, in department order.

    Employees pointing at a missing department are not counted anywhere.
    """
    out = []
    for d in departments:
        dept = Department.from_record(d)
        count = sum(1 for e in employees if same_id(e.get("departmentId"), dept.department_id))
        out.append({"departmentId": dept.department_id, "name": dept.name, "count": count})
    return out


def monthly_hires(employees: Sequence[Mapping[str, Any]]) -> list[dict]:
    """Hires per ``YYYY-MM`` month of ``hireDate``, oldest month first."""
    months = Counter(str(Employee.from_record(e).hire_date)[:7] for e in employees)
    months.pop("", None)
    return [{"month": m, "count": months[m]} for m in sorted(months)]


@dataclass(frozen=True)
class Kpis:
    total_employees: int
    active_employees: int
    pending_leaves: int
    total_departments: int

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "activeEmployees": self.active_employees,
            "pendingLeaves": self.pending_leaves,
            "totalDepartments": self.total_departments,
        }


class DashboardService:
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

    def build_summary(self) -> dict:
        employees = self._employees.list_all()
        departments = self._departments.list_all()
        attendance = self._attendance.list_all()

        kpis = Kpis(
            total_employees=len(employees),
            active_employees=sum(1 for e in employees if Employee.from_record(e).is_active),
            pending_leaves=pending_count(self._leaves.list_all()),
            total_departments=len(departments),
        )

        return {
            "kpis": kpis.to_dict(),
            "employeesPerDepartment": employees_per_department(employees, departments),
            "salaryDistribution": salary_distribution(self._salaries.list_all()),
            "attendanceRate": attendance_rate(attendance),
            "absenceTrend": absence_trend(attendance),
            "monthlyHires": monthly_hires(employees),
        }
