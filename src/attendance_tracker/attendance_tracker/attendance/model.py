from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import DayState


@dataclass(frozen=True)
class AttendanceDay:
    """Domain entity: one employee's check-in/check-out for one date."""

    check_in: Optional[str] = None
    check_out: Optional[str] = None

    @property
    def state(self) -> DayState:
        if not self.check_in:
            return DayState.NOT_CHECKED_IN
        if not self.check_out:
            return DayState.CHECKED_IN
        return DayState.COMPLETE

    def to_dict(self) -> dict:
        return {"checkIn": self.check_in, "checkOut": self.check_out}

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceDay":
        return cls(check_in=data.get("checkIn") or None, check_out=data.get("checkOut") or None)


@dataclass(frozen=True)
class AttendanceStatus:
    """Flags derived from a completed day."""

    is_late_check_in: bool
    is_early_check_out: bool
    is_half_day: bool
    working_hours: str

    def to_dict(self) -> dict:
        return {
            "isLateCheckIn": self.is_late_check_in,
            "isEarlyCheckOut": self.is_early_check_out,
            "isHalfDay": self.is_half_day,
            "workingHours": self.working_hours,
        }
