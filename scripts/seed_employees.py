from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_tracker.attendance_tracker.container import build_store_config
from src.attendance_tracker.attendance_tracker.main import load_settings
from src.attendance_tracker.attendance_tracker.storage.bootstrap import ensure_demo_employees


def main() -> None:
    config = build_store_config(load_settings())

    if ensure_demo_employees(config):
        print(f"OK: Seeded demo employees -> {config.employees_path}")
    else:
        print(f"SKIP: {config.employees_path} already has employees")


if __name__ == "__main__":
    main()
