"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SERVICE_NAME = "HR Management API"

# Collection name -> JSON file under DATA_DIR
COLLECTION_FILES = {
    "employees": "employees.json",
    "departments": "departments.json",
    "salaries": "salaries.json",
    "attendance": "attendance.json",
    "leaves": "leaves.json",
}

# (label, lower bound inclusive, upper bound exclusive)
SALARY_BUCKETS = (
    ("0-3000", 0, 3000),
    ("3000-5000", 3000, 5000),
    ("5000-7000", 5000, 7000),
    ("7000+", 7000, float("inf")),
)

ENDPOINTS = {
    "departments": "/api/departments",
    "employees": "/api/employees",
    "attendance": "/api/attendance",
    "leaves": "/api/leaves",
    "salaries": "/api/salaries",
}
