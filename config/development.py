import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DATA_DIR = Config.DATA_DIR

USE_LOCAL_DATA_ONLY = Config.USE_LOCAL_DATA_ONLY
USE_LOCAL_FALLBACK = Config.USE_LOCAL_FALLBACK
REQUEST_TIMEOUT = Config.REQUEST_TIMEOUT
RETRY_ATTEMPTS = Config.RETRY_ATTEMPTS
EXTERNAL_APIS = Config.EXTERNAL_APIS

DEMO_USERNAME = Config.DEMO_USERNAME
DEMO_PASSWORD = Config.DEMO_PASSWORD

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))
