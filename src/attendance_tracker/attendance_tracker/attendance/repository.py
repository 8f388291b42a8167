from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceDay


class AttendanceRepository(Protocol):
    def get_day(self, employee_key: str, work_date: str) -> Optional[AttendanceDay]:
        raise NotImplementedError

    def save_day(self, employee_key: str, work_date: str, day: AttendanceDay) -> None:
        raise NotImplementedError

    def snapshot(self) -> dict:
        """Whole ledger as plain JSON-ready dicts: {employee_key: {date: {checkIn, checkOut}}}."""

        raise NotImplementedError
