from __future__ import annotations

import json
import logging
import threading

from src.attendance_tracker.attendance_tracker.attendance.json_attendance_repository import JsonAttendanceRepository
from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceDay
from src.attendance_tracker.attendance_tracker.storage.json_file import JsonDocument
from src.attendance_tracker.attendance_tracker.storage.write_behind import WriteBehindWriter


class SlowDocument(JsonDocument):
    """Blocks the first write until released, recording every snapshot written."""

    def __init__(self, path):
        super().__init__(path, name="slow")
        self.release = threading.Event()
        self.started = threading.Event()
        self.written: list = []

    def write(self, data) -> None:
        self.started.set()
        self.release.wait(timeout=5)
        self.written.append(data)
        super().write(data)


def test_load_missing_file_returns_default(tmp_path):
    doc = JsonDocument(tmp_path / "nope.json", name="attendance")

    assert doc.load(default={}) == {}


def test_load_malformed_file_returns_default(tmp_path, caplog):
    path = tmp_path / "attendance.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert JsonDocument(path, name="attendance").load(default={}) == {}

    assert "Failed to read attendance" in caplog.text


def test_load_wrong_shape_returns_default(tmp_path):
    path = tmp_path / "employees.json"
    path.write_text('{"E1": "Asha"}', encoding="utf-8")

    assert JsonDocument(path, name="employees").load(default=[]) == []


def test_write_is_pretty_printed_and_replaces_file(tmp_path):
    doc = JsonDocument(tmp_path / "sub" / "attendance.json", name="attendance")
    doc.write({"E1": {"2026-02-01": {"checkIn": "10:00:00", "checkOut": None}}})
    doc.write({})

    text = doc.path.read_text(encoding="utf-8")
    assert json.loads(text) == {}
    assert list(doc.path.parent.iterdir()) == [doc.path]


def test_async_writer_writes_latest_snapshot_after_flush(tmp_path):
    writer = WriteBehindWriter(JsonDocument(tmp_path / "a.json", name="attendance"))
    try:
        for i in range(20):
            writer.submit({"n": i})
        writer.flush()
    finally:
        writer.close()

    assert json.loads((tmp_path / "a.json").read_text(encoding="utf-8")) == {"n": 19}


def test_pending_snapshots_are_coalesced(tmp_path):
    doc = SlowDocument(tmp_path / "slow.json")
    writer = WriteBehindWriter(doc)
    try:
        writer.submit({"n": 0})
        assert doc.started.wait(timeout=5)
        writer.submit({"n": 1})
        writer.submit({"n": 2})
        writer.submit({"n": 3})
        doc.release.set()
        writer.flush()
    finally:
        writer.close()

    assert doc.written == [{"n": 0}, {"n": 3}]


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    # Parent "directory" is a regular file, so the write must fail.
    writer = WriteBehindWriter(JsonDocument(blocker / "attendance.json", name="attendance"), run_async=False)

    with caplog.at_level(logging.ERROR):
        writer.submit({"E1": {}})

    assert "Persistence failed for attendance" in caplog.text


def test_attendance_repository_persists_and_reloads(tmp_path):
    doc = JsonDocument(tmp_path / "attendance.json", name="attendance")
    repo = JsonAttendanceRepository(WriteBehindWriter(doc, run_async=False))
    repo.save_day("E1", "2026-02-01", AttendanceDay(check_in="10:00:00"))
    repo.save_day("E1", "2026-02-01", AttendanceDay(check_in="10:00:00", check_out="17:00:00"))

    reloaded = JsonAttendanceRepository(WriteBehindWriter(doc, run_async=False))

    assert reloaded.get_day("E1", "2026-02-01") == AttendanceDay(check_in="10:00:00", check_out="17:00:00")
    assert reloaded.snapshot() == {"E1": {"2026-02-01": {"checkIn": "10:00:00", "checkOut": "17:00:00"}}}


def test_snapshot_is_a_copy(tmp_path):
    repo = JsonAttendanceRepository(
        WriteBehindWriter(JsonDocument(tmp_path / "attendance.json", name="attendance"), run_async=False)
    )
    repo.save_day("E1", "2026-02-01", AttendanceDay(check_in="10:00:00"))

    snap = repo.snapshot()
    snap["E1"]["2026-02-01"]["checkIn"] = "tampered"

    assert repo.get_day("E1", "2026-02-01").check_in == "10:00:00"


def test_submit_after_close_writes_synchronously_and_flush_returns(tmp_path):
    path = tmp_path / "a.json"
    writer = WriteBehindWriter(JsonDocument(path, name="attendance"))
    writer.submit({"n": 0})
    writer.close()

    writer.submit({"n": 1})

    flusher = threading.Thread(target=writer.flush)
    flusher.start()
    flusher.join(timeout=2)
    assert not flusher.is_alive()
    assert json.loads(path.read_text(encoding="utf-8")) == {"n": 1}
    writer.close()
