from __future__ import annotations

import logging
import threading
from typing import Optional

from ..storage.write_behind import WriteBehindWriter
from .model import AttendanceDay
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class JsonAttendanceRepository(AttendanceRepository):
    def __init__(self, writer: WriteBehindWriter):
        self._writer = writer
        self._lock = threading.RLock()
        self._ledger: dict[str, dict[str, AttendanceDay]] = {}

        for employee_key, days in writer.document.load(default={}).items():
            if not isinstance(days, dict):
                logger.warning("Skipping malformed attendance entry for %s", employee_key)
                continue
            self._ledger[employee_key] = {
                work_date: AttendanceDay.from_dict(day) for work_date, day in days.items() if isinstance(day, dict)
            }

    def get_day(self, employee_key: str, work_date: str) -> Optional[AttendanceDay]:
        with self._lock:
            return self._ledger.get(employee_key, {}).get(work_date)

    def save_day(self, employee_key: str, work_date: str, day: AttendanceDay) -> None:
        with self._lock:
            self._ledger.setdefault(employee_key, {})[work_date] = day
            snapshot = self._snapshot_locked()
        self._writer.submit(snapshot)

    def snapshot(self) -> dict:
        with self._lock:
            return self._snapshot_locked()

    def _snapshot_locked(self) -> dict:
        return {
            employee_key: {work_date: day.to_dict() for work_date, day in days.items()}
            for employee_key, days in self._ledger.items()
        }
