from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .employees.controller import register as register_employees
from .storage.bootstrap import seed_demo_employees
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _add_cors_headers(app: Flask) -> None:
    origin = app.config.get("CORS_ALLOW_ORIGIN")
    if not origin:
        return

    @app.after_request
    def cors(response):
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        return response


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    if overrides:
        app.config.update(overrides)
    app.secret_key = app.config["SECRET_KEY"]

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    # Unreadable or corrupt data aborts startup here.
    container = build_container(settings=app.config)
    app.extensions["employee_records"] = container

    logger.info(
        "settings=%s data_file=%s records=%d",
        settings_module,
        container.paths.data_file,
        len(container.employee_store),
    )

    if app.config.get("AUTO_SEED_DATA"):
        seeded = seed_demo_employees(container.employee_store)
        if seeded:
            logger.info("Seeded %d demo employees", seeded)

    register_users(app, container)
    register_employees(app, container)
    _add_cors_headers(app)

    return app
