from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from ..common.validators import normalize_employee_id, require_non_empty
from ..core.exceptions import DuplicateIdError, DuplicateNameError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: employee directory (list, lookup, add)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees
        self._lock = threading.RLock()

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def find(self, employee_id: Optional[str]) -> Optional[Employee]:
        if not isinstance(employee_id, str) or not employee_id.strip():
            return None
        return self._employees.get_by_key(normalize_employee_id(employee_id))

    def find_by_id(self, employee_id: Optional[str]) -> Employee:
        employee = self.find(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def add(self, employee_id: Optional[str], name: Optional[str]) -> Employee:
        message = "ID and Name are required"
        # The id is kept as submitted; only its normalized form is compared.
        require_non_empty(employee_id, message)
        name = require_non_empty(name, message)

        with self._lock:
            if self._employees.get_by_key(normalize_employee_id(employee_id)):
                raise DuplicateIdError("Employee with this ID already exists")
            if self._employees.get_by_name(name):
                raise DuplicateNameError("Employee with this name already exists")

            employee = Employee(id=employee_id, name=name)
            self._employees.create(employee)

        logger.info("Added employee %s (%s)", employee.id, employee.name)
        return employee
