from __future__ import annotations

import logging

from .json_file import JsonDocument, StoreConfig

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = [
    {"id": "E001", "name": "Aarav Sharma"},
    {"id": "E002", "name": "Priya Nair"},
    {"id": "E003", "name": "Rohan Mehta"},
]


def ensure_data_dir(config: StoreConfig) -> None:
    config.data_dir.mkdir(parents=True, exist_ok=True)


def ensure_demo_employees(config: StoreConfig) -> bool:
    """Write the demo employee list if the employee file is missing or empty.

    Returns True when the file was written.
    """
    doc = JsonDocument(config.employees_path, name="employees")
    if doc.load(default=[]):
        return False

    ensure_data_dir(config)
    doc.write(list(DEMO_EMPLOYEES))
    logger.info("Seeded %d demo employees into %s", len(DEMO_EMPLOYEES), doc.path)
    return True
