import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = Config.DATA_DIR

USE_LOCAL_DATA_ONLY = Config.USE_LOCAL_DATA_ONLY
USE_LOCAL_FALLBACK = Config.USE_LOCAL_FALLBACK
REQUEST_TIMEOUT = Config.REQUEST_TIMEOUT
RETRY_ATTEMPTS = Config.RETRY_ATTEMPTS
EXTERNAL_APIS = Config.EXTERNAL_APIS

DEMO_USERNAME = Config.DEMO_USERNAME
DEMO_PASSWORD = Config.DEMO_PASSWORD

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
