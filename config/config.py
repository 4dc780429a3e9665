import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "hr-management-secret"

    # Local JSON storage
    DATA_DIR = os.environ.get("DATA_DIR", str(BASE_DIR / "data"))

    # External API proxy (kept switched off: local files are the source of truth)
    USE_LOCAL_DATA_ONLY = bool(int(os.environ.get("USE_LOCAL_DATA_ONLY", "1")))
    USE_LOCAL_FALLBACK = bool(int(os.environ.get("USE_LOCAL_FALLBACK", "1")))
    REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))
    RETRY_ATTEMPTS = int(os.environ.get("RETRY_ATTEMPTS", "3"))
    EXTERNAL_APIS = {
        "employees": os.environ.get("EMPLOYEES_API", "https://jsonplaceholder.typicode.com/users"),
        "departments": os.environ.get("DEPARTMENTS_API", "https://your-external-api.com/api/departments"),
        "salaries": os.environ.get("SALARIES_API", "https://your-external-api.com/api/salaries"),
        "attendance": os.environ.get("ATTENDANCE_API", "https://your-external-api.com/api/attendance"),
        "leaves": os.environ.get("LEAVES_API", "https://your-external-api.com/api/leaves"),
    }

    # Demo login
    DEMO_USERNAME = os.environ.get("DEMO_USERNAME", "admin")
    DEMO_PASSWORD = os.environ.get("DEMO_PASSWORD", "admin")


# Module-level names read by create_app()
SECRET_KEY = Config.SECRET_KEY
DATA_DIR = Config.DATA_DIR
USE_LOCAL_DATA_ONLY = Config.USE_LOCAL_DATA_ONLY
USE_LOCAL_FALLBACK = Config.USE_LOCAL_FALLBACK
REQUEST_TIMEOUT = Config.REQUEST_TIMEOUT
RETRY_ATTEMPTS = Config.RETRY_ATTEMPTS
EXTERNAL_APIS = Config.EXTERNAL_APIS
DEMO_USERNAME = Config.DEMO_USERNAME
DEMO_PASSWORD = Config.DEMO_PASSWORD

DEBUG = bool(int(os.environ.get("DEBUG", "1")))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "5000"))
