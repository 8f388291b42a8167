import os


class Config:
    """Settings shared by every environment."""

    DATA_DIR = os.environ.get("DATA_DIR", "data")
    EMPLOYEES_FILE = os.environ.get("EMPLOYEES_FILE", "employees.json")
    ATTENDANCE_FILE = os.environ.get("ATTENDANCE_FILE", "attendance.json")

    # Comma-separated CORS origins; empty allows any origin
    FRONTEND_ORIGINS = os.environ.get("FRONTEND_ORIGINS", "")

    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT", "3000"))
