from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreConfig:
    data_dir: Path
    employees_file: str
    attendance_file: str
    persist_async: bool = True

    @property
    def employees_path(self) -> Path:
        return self.data_dir / self.employees_file

    @property
    def attendance_path(self) -> Path:
        return self.data_dir / self.attendance_file


class JsonDocument:
    """One JSON file read once at startup and overwritten wholesale on save."""

    def __init__(self, path: str | Path, *, name: str):
        self.path = Path(path)
        self.name = name

    def load(self, default: Any) -> Any:
        """Return the parsed document, or ``default`` if missing or unreadable."""
        if not self.path.exists():
            logger.info("%s file %s not found, starting empty", self.name, self.path)
            return default
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read %s file %s: %s", self.name, self.path, e)
            return default
        if not isinstance(data, type(default)):
            logger.warning(
                "Ignoring %s file %s: expected %s, got %s",
                self.name, self.path, type(default).__name__, type(data).__name__,
            )
            return default
        return data

    def write(self, data: Any) -> None:
        """Serialize ``data`` to a temp file next to the target, then replace it."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Failed to save {self.name} to {self.path}: {e}") from e
