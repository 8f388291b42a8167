"""Back up the JSON data files.

Note: copies employees.json and attendance.json into ``backups/`` with a
timestamp suffix. Missing files are skipped.
"""

from __future__ import annotations

import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_tracker.attendance_tracker.container import build_store_config
from src.attendance_tracker.attendance_tracker.main import load_settings


def backup_files(paths: list[Path], out_dir: Path, *, now: datetime | None = None) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")

    written = []
    for path in paths:
        if not path.exists():
            continue
        target = out_dir / f"{path.stem}_{ts}{path.suffix}"
        shutil.copy2(path, target)
        written.append(target)
    return written


def main() -> None:
    config = build_store_config(load_settings())
    written = backup_files([config.employees_path, config.attendance_path], REPO_ROOT / "backups")

    if not written:
        raise SystemExit(f"No data files found in {config.data_dir}")
    for target in written:
        print(f"OK: Backup created: {target}")


if __name__ == "__main__":
    main()
