import os

from config.config import Config

DATA_DIR = Config.DATA_DIR
EMPLOYEES_FILE = Config.EMPLOYEES_FILE
ATTENDANCE_FILE = Config.ATTENDANCE_FILE
FRONTEND_ORIGINS = Config.FRONTEND_ORIGINS
HOST = os.getenv("HOST", "0.0.0.0")
PORT = Config.PORT

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PERSIST_ASYNC = bool(int(os.getenv("PERSIST_ASYNC", "1")))
AUTO_SEED_EMPLOYEES = bool(int(os.getenv("AUTO_SEED_EMPLOYEES", "0")))
