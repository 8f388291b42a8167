from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on the JSON file.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_key(self, key: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Employee]:
        """Case-insensitive name lookup."""

        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        raise NotImplementedError
