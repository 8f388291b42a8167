import os

from config.config import Config

DATA_DIR = os.getenv("DATA_DIR", "data-test")
EMPLOYEES_FILE = Config.EMPLOYEES_FILE
ATTENDANCE_FILE = Config.ATTENDANCE_FILE
FRONTEND_ORIGINS = ""
HOST = Config.HOST
PORT = Config.PORT

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Synchronous writes keep tests deterministic
PERSIST_ASYNC = False
AUTO_SEED_EMPLOYEES = False
