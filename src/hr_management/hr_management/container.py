from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import httpx

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .dashboard.service import DashboardService
from .departments.repository import DepartmentRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leaves.repository import LeaveRepository
from .salaries.repository import SalaryRepository
from .storage.connection import StorageConfig, StoreFactory


@dataclass(frozen=True)
class Container:
    stores: StoreFactory

    employees_repo: EmployeeRepository
    departments_repo: DepartmentRepository
    salaries_repo: SalaryRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_container(*, settings: Mapping[str, object], transport: Optional[httpx.BaseTransport] = None) -> Container:
    config = StorageConfig(
        data_dir=Path(str(settings["DATA_DIR"])),
        use_local_data_only=bool(settings.get("USE_LOCAL_DATA_ONLY", True)),
        use_local_fallback=bool(settings.get("USE_LOCAL_FALLBACK", True)),
        request_timeout=float(settings.get("REQUEST_TIMEOUT", 10.0)),
        retry_attempts=int(settings.get("RETRY_ATTEMPTS", 3)),
        external_apis=dict(settings.get("EXTERNAL_APIS") or {}),
    )
    stores = StoreFactory(config, transport=transport)

    employees_repo = EmployeeRepository(stores.open("employees"))
    departments_repo = DepartmentRepository(stores.open("departments"))
    salaries_repo = SalaryRepository(stores.open("salaries"))
    attendance_repo = AttendanceRepository(stores.open("attendance"))
    leaves_repo = LeaveRepository(stores.open("leaves"))

    auth_service = AuthService(
        str(settings.get("DEMO_USERNAME", "admin")),
        str(settings.get("DEMO_PASSWORD", "admin")),
    )
    employee_service = EmployeeService(employees_repo, departments_repo, salaries_repo, attendance_repo, leaves_repo)
    attendance_service = AttendanceService(attendance_repo)
    dashboard_service = DashboardService(employees_repo, departments_repo, salaries_repo, attendance_repo, leaves_repo)

    return Container(
        stores=stores,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        salaries_repo=salaries_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )
