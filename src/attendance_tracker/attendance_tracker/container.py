from __future__ import annotations

import atexit
from dataclasses import dataclass
from pathlib import Path

from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock
from .core.constants import DEFAULT_ATTENDANCE_FILE, DEFAULT_EMPLOYEES_FILE
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.service import EmployeeService
from .storage.json_file import JsonDocument, StoreConfig
from .storage.write_behind import WriteBehindWriter


@dataclass(frozen=True)
class Container:
    config: StoreConfig

    employees_writer: WriteBehindWriter
    attendance_writer: WriteBehindWriter

    employees_repo: JsonEmployeeRepository
    attendance_repo: JsonAttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService

    def flush(self) -> None:
        self.employees_writer.flush()
        self.attendance_writer.flush()

    def close(self) -> None:
        self.employees_writer.close()
        self.attendance_writer.close()
        atexit.unregister(self.close)


def build_store_config(settings: dict) -> StoreConfig:
    return StoreConfig(
        data_dir=Path(settings.get("DATA_DIR") or "data"),
        employees_file=str(settings.get("EMPLOYEES_FILE") or DEFAULT_EMPLOYEES_FILE),
        attendance_file=str(settings.get("ATTENDANCE_FILE") or DEFAULT_ATTENDANCE_FILE),
        persist_async=bool(settings.get("PERSIST_ASYNC", True)),
    )


def build_container(*, config: StoreConfig, clock: Clock | None = None) -> Container:
    employees_writer = WriteBehindWriter(
        JsonDocument(config.employees_path, name="employees"), run_async=config.persist_async
    )
    attendance_writer = WriteBehindWriter(
        JsonDocument(config.attendance_path, name="attendance"), run_async=config.persist_async
    )

    employees_repo = JsonEmployeeRepository(employees_writer)
    attendance_repo = JsonAttendanceRepository(attendance_writer)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employee_service, clock=clock)

    container = Container(
        config=config,
        employees_writer=employees_writer,
        attendance_writer=attendance_writer,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
    )
    atexit.register(container.close)
    return container
