from __future__ import annotations

from datetime import datetime
from pathlib import Path

from scripts.backup import backup_files
from src.attendance_tracker.attendance_tracker import container as container_module
from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.main import create_app
from src.attendance_tracker.attendance_tracker.storage.bootstrap import DEMO_EMPLOYEES, ensure_demo_employees
from src.attendance_tracker.attendance_tracker.storage.json_file import JsonDocument, StoreConfig


def _config(tmp_path: Path) -> StoreConfig:
    return StoreConfig(data_dir=tmp_path / "data", employees_file="employees.json", attendance_file="attendance.json")


def test_seed_writes_demo_employees_once(tmp_path):
    config = _config(tmp_path)

    assert ensure_demo_employees(config) is True
    assert ensure_demo_employees(config) is False
    assert JsonDocument(config.employees_path, name="employees").load(default=[]) == DEMO_EMPLOYEES


def test_seed_leaves_existing_employees_alone(tmp_path):
    config = _config(tmp_path)
    JsonDocument(config.employees_path, name="employees").write([{"id": "X1", "name": "Kept"}])

    assert ensure_demo_employees(config) is False
    assert JsonDocument(config.employees_path, name="employees").load(default=[]) == [{"id": "X1", "name": "Kept"}]


def test_create_app_auto_seeds_when_enabled(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"DATA_DIR": str(tmp_path), "AUTO_SEED_EMPLOYEES": True})

    resp = app.test_client().get("/employees")

    assert [e["id"] for e in resp.get_json()] == [e["id"] for e in DEMO_EMPLOYEES]
    app.extensions["attendance_tracker"].close()


def test_backup_copies_existing_files(tmp_path):
    config = _config(tmp_path)
    JsonDocument(config.employees_path, name="employees").write([])

    written = backup_files(
        [config.employees_path, config.attendance_path],
        tmp_path / "backups",
        now=datetime(2026, 2, 1, 9, 30, 0),
    )

    assert written == [tmp_path / "backups" / "employees_20260201_093000.json"]
    assert written[0].read_text(encoding="utf-8") == config.employees_path.read_text(encoding="utf-8")


def test_container_close_drops_exit_hook(tmp_path, monkeypatch):
    registered = []
    monkeypatch.setattr(container_module.atexit, "register", registered.append)
    monkeypatch.setattr(container_module.atexit, "unregister", registered.remove)

    container = build_container(config=_config(tmp_path))
    assert registered == [container.close]

    container.close()
    assert registered == []
