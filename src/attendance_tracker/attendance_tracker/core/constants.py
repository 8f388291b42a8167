"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time, timedelta, timezone

OFFICE_START = time(10, 0, 0)
OFFICE_END = time(17, 0, 0)
LATE_CHECKIN_AFTER = time(10, 15, 0)
EARLY_CHECKOUT_BEFORE = time(16, 45, 0)

# India has no DST, a fixed offset is exact.
IST = timezone(timedelta(hours=5, minutes=30), "IST")

TIME_FORMAT = "%H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

DEFAULT_EMPLOYEES_FILE = "employees.json"
DEFAULT_ATTENDANCE_FILE = "attendance.json"
