import os

from config.config import Config

DATA_DIR = Config.DATA_DIR
EMPLOYEES_FILE = Config.EMPLOYEES_FILE
ATTENDANCE_FILE = Config.ATTENDANCE_FILE
FRONTEND_ORIGINS = Config.FRONTEND_ORIGINS
HOST = Config.HOST
PORT = Config.PORT

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Write JSON files on a background thread (fire-and-forget)
PERSIST_ASYNC = bool(int(os.getenv("PERSIST_ASYNC", "1")))
# If enabled, app writes demo employees when employees.json is missing or empty
AUTO_SEED_EMPLOYEES = bool(int(os.getenv("AUTO_SEED_EMPLOYEES", "1")))
