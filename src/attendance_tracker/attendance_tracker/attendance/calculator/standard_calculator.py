from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ...common.datetime_utils import parse_time_of_day, seconds_since_midnight
from ...core.constants import EARLY_CHECKOUT_BEFORE, LATE_CHECKIN_AFTER, OFFICE_END, OFFICE_START
from ..model import AttendanceStatus
from .base import StatusCalculator

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class OfficeHours:
    start: time = OFFICE_START
    end: time = OFFICE_END
    late_after: time = LATE_CHECKIN_AFTER
    early_before: time = EARLY_CHECKOUT_BEFORE

    @property
    def half_day_seconds(self) -> int:
        return (seconds_since_midnight(self.end) - seconds_since_midnight(self.start)) // 2


def format_working_hours(seconds: int) -> str:
    """Render a duration as "<H>h <M>m", dropping leftover seconds."""
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


class StandardStatusCalculator(StatusCalculator):
    """Standard rule: flags against fixed office hours.

    A check-out earlier on the clock than the check-in is read as a shift
    that ran past midnight.
    """

    def __init__(self, hours: OfficeHours | None = None):
        self._hours = hours or OfficeHours()

    def compute(self, check_in: Optional[str], check_out: Optional[str]) -> Optional[AttendanceStatus]:
        if not check_in or not check_out:
            return None

        t_in = parse_time_of_day(check_in)
        t_out = parse_time_of_day(check_out)

        worked = seconds_since_midnight(t_out) - seconds_since_midnight(t_in)
        if worked < 0:
            worked += SECONDS_PER_DAY

        return AttendanceStatus(
            is_late_check_in=t_in > self._hours.late_after,
            is_early_check_out=t_out < self._hours.early_before,
            is_half_day=worked < self._hours.half_day_seconds,
            working_hours=format_working_hours(worked),
        )


_default = StandardStatusCalculator()


def compute_status(check_in: Optional[str], check_out: Optional[str]) -> Optional[AttendanceStatus]:
    return _default.compute(check_in, check_out)
