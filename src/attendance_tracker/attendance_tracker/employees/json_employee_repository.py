from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from ..storage.write_behind import WriteBehindWriter
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, writer: WriteBehindWriter):
        self._writer = writer
        self._lock = threading.RLock()
        self._employees: list[Employee] = []

        for row in writer.document.load(default=[]):
            if not isinstance(row, dict) or not isinstance(row.get("id"), str) or not isinstance(row.get("name"), str):
                logger.warning("Skipping malformed employee row: %r", row)
                continue
            self._employees.append(Employee(id=row["id"], name=row["name"]))

    def list_all(self) -> Sequence[Employee]:
        with self._lock:
            return list(self._employees)

    def get_by_key(self, key: str) -> Optional[Employee]:
        with self._lock:
            return next((e for e in self._employees if e.key == key), None)

    def get_by_name(self, name: str) -> Optional[Employee]:
        folded = name.lower()
        with self._lock:
            return next((e for e in self._employees if e.name.lower() == folded), None)

    def create(self, employee: Employee) -> None:
        with self._lock:
            self._employees.append(employee)
            snapshot = [e.to_dict() for e in self._employees]
        self._writer.submit(snapshot)
