import os
import tempfile

from config.config import Config

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "hr_management_test_data"))

USE_LOCAL_DATA_ONLY = True
USE_LOCAL_FALLBACK = True
REQUEST_TIMEOUT = 1.0
RETRY_ATTEMPTS = 1
EXTERNAL_APIS = Config.EXTERNAL_APIS

DEMO_USERNAME = "admin"
DEMO_PASSWORD = "admin"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

HOST = "127.0.0.1"
PORT = 5000
