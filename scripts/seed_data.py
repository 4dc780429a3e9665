from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.hr_management.hr_management.container import build_container
from src.hr_management.hr_management.main import load_settings

DEPARTMENTS = [
    {"name": "Engineering", "manager": "Ada Lovelace", "description": "Product development"},
    {"name": "Human Resources", "manager": "Grace Hopper", "description": "People operations"},
]

EMPLOYEES = [
    {"firstName": "Alan", "lastName": "Turing", "email": "alan@example.com", "phone": "555-0101",
     "departmentId": "1", "hireDate": "2024-01-15", "status": "Active", "picture": ""},
    {"firstName": "Katherine", "lastName": "Johnson", "email": "katherine@example.com", "phone": "555-0102",
     "departmentId": "2", "hireDate": "2024-03-01", "status": "Active", "picture": ""},
]

SALARIES = [
    {"employeeId": "1", "baseSalary": 5200, "bonus": 300, "month": "2024-05"},
    {"employeeId": "2", "baseSalary": 3900, "bonus": 0, "month": "2024-05"},
]

ATTENDANCE = [
    {"employeeId": "1", "date": "2024-05-02", "status": "Present"},
    {"employeeId": "2", "date": "2024-05-02", "status": "Late"},
    {"employeeId": "2", "date": "2024-05-03", "status": "Absent"},
]

LEAVES = [
    {"employeeId": "1", "startDate": "2024-06-10", "endDate": "2024-06-14", "type": "Vacation",
     "status": "Pending", "reason": "Family trip"},
]


def main() -> None:
    container = build_container(settings=load_settings())
    seeded = 0
    for repo, rows in (
        (container.departments_repo, DEPARTMENTS),
        (container.employees_repo, EMPLOYEES),
        (container.salaries_repo, SALARIES),
        (container.attendance_repo, ATTENDANCE),
        (container.leaves_repo, LEAVES),
    ):
        # Only seed empty collections so the script can be re-run safely.
        if repo.list_all():
            continue
        for row in rows:
            repo.create(row)
            seeded += 1

    print(f"OK: Seeded {seeded} demo records")


if __name__ == "__main__":
    main()
