from __future__ import annotations

from enum import Enum


class DayState(str, Enum):
    """Where an employee stands in today's check-in/check-out flow."""

    NOT_CHECKED_IN = "NOT_CHECKED_IN"
    CHECKED_IN = "CHECKED_IN"
    COMPLETE = "COMPLETE"
