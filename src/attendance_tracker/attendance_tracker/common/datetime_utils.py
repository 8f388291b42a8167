from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timezone, tzinfo

from ..core.constants import DATE_FORMAT, IST, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_time_of_day(value: str) -> time:
    """Parse a 24-hour "HH:MM:SS" string (seconds optional) into time."""
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValidationError(f"Invalid time of day: {value!r}")
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) == 3 else 0
        return time(hour=hours, minute=minutes, second=seconds)
    except ValueError:
        raise ValidationError(f"Invalid time of day: {value!r}") from None


def seconds_since_midnight(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


@dataclass(frozen=True)
class Clock:
    """Source of "now" for the ledger.

    Timestamps are rendered in ``time_zone`` while the ledger day key is taken
    from ``date_zone``. Wrapped so tests can pass a fixed clock.
    """

    time_zone: tzinfo = IST
    date_zone: tzinfo = timezone.utc

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def now_time(self) -> str:
        return self.now().astimezone(self.time_zone).strftime(TIME_FORMAT)

    def today(self) -> str:
        return self.now().astimezone(self.date_zone).strftime(DATE_FORMAT)


@dataclass(frozen=True)
class FixedClock(Clock):
    """Clock pinned to one instant (aware datetime)."""

    instant: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.instant
