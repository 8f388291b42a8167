from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import normalize_employee_id


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``id`` keeps the form it was submitted in; ``key`` is the normalized form
    used for every comparison and as the attendance ledger key.
    """

    id: str
    name: str

    @property
    def key(self) -> str:
        return normalize_employee_id(self.id)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
