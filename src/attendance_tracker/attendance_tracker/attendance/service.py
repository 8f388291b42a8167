from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import Clock
from ..common.validators import normalize_employee_id, require_non_empty
from ..core.exceptions import AlreadyCheckedInError, AlreadyCheckedOutError, CheckInRequiredError
from ..employees.model import Employee
from ..employees.service import EmployeeService
from .calculator.base import StatusCalculator
from .calculator.standard_calculator import StandardStatusCalculator
from .model import AttendanceDay
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    employee: Employee
    work_date: str
    check_in: str


@dataclass(frozen=True)
class CheckOutResult:
    employee: Employee
    work_date: str
    check_out: str


@dataclass(frozen=True)
class TodaySummary:
    employee: Employee
    work_date: str
    day: AttendanceDay

    def to_dict(self) -> dict:
        return {
            "employee": self.employee.to_dict(),
            "date": self.work_date,
            "state": self.day.state.value,
            **self.day.to_dict(),
        }


class AttendanceService:
    """Use case: daily check-in/check-out and single-day lookups.

    Check-in and check-out run their read-validate-write sequence under one
    lock so concurrent requests for the same employee cannot both pass
    validation.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeService,
        *,
        calculator: StatusCalculator | None = None,
        clock: Clock | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardStatusCalculator()
        self._clock = clock or Clock()
        self._lock = threading.RLock()

    def check_in(self, employee_id: Optional[str]) -> CheckInResult:
        employee_id = require_non_empty(employee_id, "empId is required")
        employee = self._employees.find_by_id(employee_id)
        today = self._clock.today()

        with self._lock:
            existing = self._attendance.get_day(employee.key, today)
            if existing and existing.check_in:
                raise AlreadyCheckedInError("Already checked in today")

            now = self._clock.now_time()
            self._attendance.save_day(employee.key, today, AttendanceDay(check_in=now))

        logger.info("Employee %s checked in at %s on %s", employee.key, now, today)
        return CheckInResult(employee=employee, work_date=today, check_in=now)

    def check_out(self, employee_id: Optional[str]) -> CheckOutResult:
        employee_id = require_non_empty(employee_id, "empId is required")
        employee = self._employees.find_by_id(employee_id)
        today = self._clock.today()

        with self._lock:
            existing = self._attendance.get_day(employee.key, today)
            if not existing or not existing.check_in:
                raise CheckInRequiredError("Check-in required before check-out")
            if existing.check_out:
                raise AlreadyCheckedOutError("Already checked out today")

            now = self._clock.now_time()
            self._attendance.save_day(employee.key, today, AttendanceDay(check_in=existing.check_in, check_out=now))

        logger.info("Employee %s checked out at %s on %s", employee.key, now, today)
        return CheckOutResult(employee=employee, work_date=today, check_out=now)

    def get_attendance(self, employee_id: str, work_date: str) -> dict:
        """Stored times for one day merged with derived status flags.

        Missing records read as both times null, with no status keys.
        """
        day = self._attendance.get_day(normalize_employee_id(employee_id), work_date)
        if not day:
            return {"checkIn": None, "checkOut": None}

        status = self._calculator.compute(day.check_in, day.check_out)
        return {**day.to_dict(), **(status.to_dict() if status else {})}

    def get_all(self) -> dict:
        return self._attendance.snapshot()

    def get_today(self, employee_id: Optional[str]) -> TodaySummary:
        employee = self._employees.find_by_id(employee_id)
        today = self._clock.today()
        day = self._attendance.get_day(employee.key, today) or AttendanceDay()
        return TodaySummary(employee=employee, work_date=today, day=day)
