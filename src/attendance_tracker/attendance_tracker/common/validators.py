from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def normalize_employee_id(value: str) -> str:
    """Comparison key for employee ids (the stored form keeps its case)."""
    return value.strip().upper()
