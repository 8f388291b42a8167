from datetime import time

import pytest

from src.attendance_tracker.attendance_tracker.attendance.calculator.standard_calculator import (
    OfficeHours,
    StandardStatusCalculator,
    compute_status,
    format_working_hours,
)
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError


def test_late_and_early_but_not_half_day():
    status = compute_status("10:20:00", "16:30:00")

    assert status is not None
    assert status.is_late_check_in is True
    assert status.is_early_check_out is True
    assert status.is_half_day is False
    assert status.working_hours == "6h 10m"


def test_short_day_is_half_day():
    status = compute_status("09:00:00", "11:00:00")

    assert status.is_half_day is True
    assert status.is_late_check_in is False
    assert status.working_hours == "2h 0m"


def test_checkout_before_checkin_wraps_past_midnight():
    status = compute_status("23:00:00", "02:00:00")

    assert status.working_hours == "3h 0m"
    assert status.is_half_day is True


@pytest.mark.parametrize("check_in, check_out", [(None, "17:00:00"), ("10:00:00", None), (None, None), ("", "17:00:00")])
def test_missing_time_returns_none(check_in, check_out):
    assert compute_status(check_in, check_out) is None


def test_grace_boundaries_are_exclusive():
    status = compute_status("10:15:00", "16:45:00")

    assert status.is_late_check_in is False
    assert status.is_early_check_out is False


def test_one_second_past_grace_is_late_and_early():
    status = compute_status("10:15:01", "16:44:59")

    assert status.is_late_check_in is True
    assert status.is_early_check_out is True


def test_exactly_three_and_a_half_hours_is_not_half_day():
    assert compute_status("10:00:00", "13:30:00").is_half_day is False
    assert compute_status("10:00:00", "13:29:59").is_half_day is True


def test_working_hours_drops_seconds():
    status = compute_status("10:00:30", "17:10:29")

    assert status.working_hours == "7h 9m"


def test_format_working_hours_floors_minutes():
    assert format_working_hours(0) == "0h 0m"
    assert format_working_hours(59) == "0h 0m"
    assert format_working_hours(3 * 3600 + 59 * 60 + 59) == "3h 59m"


def test_to_dict_uses_json_keys():
    assert compute_status("10:00:00", "17:00:00").to_dict() == {
        "isLateCheckIn": False,
        "isEarlyCheckOut": False,
        "isHalfDay": False,
        "workingHours": "7h 0m",
    }


def test_custom_office_hours():
    hours = OfficeHours(start=time(8, 0), end=time(12, 0), late_after=time(8, 5), early_before=time(11, 55))
    calc = StandardStatusCalculator(hours)

    status = calc.compute("08:10:00", "09:30:00")

    assert status.is_late_check_in is True
    assert status.is_half_day is True  # half of 4h is 2h


def test_malformed_time_raises():
    with pytest.raises(ValidationError):
        compute_status("ten o'clock", "17:00:00")
