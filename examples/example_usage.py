"""Example: use the repositories and services directly (without Flask).

Controllers are a thin layer; reads, joins and aggregation live in services.
"""

from src.hr_management.hr_management.container import build_container
from src.hr_management.hr_management.main import load_settings


def main():
    container = build_container(settings=load_settings())
    print(container.dashboard_service.build_summary()["kpis"])
    for employee in container.employees_repo.list_all()[:5]:
        print(employee.get("id"), container.employee_service.department_name(employee))


if __name__ == "__main__":
    main()
