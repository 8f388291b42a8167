from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import Clock
from .container import build_container, build_store_config
from .core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from .employees.controller import register as register_employees
from .storage.bootstrap import ensure_data_dir, ensure_demo_employees

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

ERROR_STATUS = (
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 400),
)


def load_settings(overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def _configure_logging(settings: dict[str, Any]) -> None:
    level = str(settings.get("LOG_LEVEL") or ("DEBUG" if settings.get("DEBUG") else "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__package__).setLevel(level)


def _configure_cors(app: Flask, settings: dict[str, Any]) -> None:
    # Comma-separated list; empty means allow all origins.
    origins = [o.strip() for o in str(settings.get("FRONTEND_ORIGINS") or "").split(",") if o.strip()]
    if origins:
        CORS(app, origins=origins)
    else:
        CORS(app)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        for exc_type, status in ERROR_STATUS:
            if isinstance(e, exc_type):
                return jsonify({"error": str(e)}), status
        logger.error("Unmapped domain error: %s", e)
        return jsonify({"error": str(e)}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error"}), 500


def create_app(overrides: Optional[dict[str, Any]] = None, *, clock: Clock | None = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(overrides)
    _configure_logging(settings)

    app = Flask(__name__)
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.json.sort_keys = False

    store_config = build_store_config(settings)
    logger.info(
        "settings=%s employees=%s attendance=%s async=%s",
        settings["SETTINGS_MODULE"], store_config.employees_path, store_config.attendance_path,
        store_config.persist_async,
    )

    ensure_data_dir(store_config)
    if settings.get("AUTO_SEED_EMPLOYEES"):
        ensure_demo_employees(store_config)

    container = build_container(config=store_config, clock=clock)
    app.extensions["attendance_tracker"] = container

    _configure_cors(app, settings)
    _register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)

    return app
