"""HR Management package.

This package is organized by feature modules (employees, departments, salaries,
attendance, leaves, ...) with a thin Flask controller layer over entity
repositories backed by flat JSON collection files.
"""

__version__ = "1.0.0"
