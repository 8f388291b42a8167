from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import AttendanceStatus


class StatusCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance status)."""

    @abstractmethod
    def compute(self, check_in: Optional[str], check_out: Optional[str]) -> Optional[AttendanceStatus]:
        raise NotImplementedError
