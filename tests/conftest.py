from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.attendance_tracker.attendance_tracker.common.datetime_utils import FixedClock
from src.attendance_tracker.attendance_tracker.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    # 04:30 UTC == 10:00:00 IST
    return datetime(2026, 2, 1, 4, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_now) -> FixedClock:
    return FixedClock(instant=fixed_now)


@pytest.fixture
def app(tmp_path, monkeypatch, fixed_clock):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {"DATA_DIR": str(tmp_path), "PERSIST_ASYNC": False, "AUTO_SEED_EMPLOYEES": False},
        clock=fixed_clock,
    )
    yield app
    app.extensions["attendance_tracker"].close()


@pytest.fixture
def client(app):
    return app.test_client()
