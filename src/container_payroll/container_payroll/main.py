from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_utils import setup_logger
from .container import build_container
from .ledger.controller import register as register_ledger
from .payroll.controller import register as register_payroll
from .teams.controller import register as register_teams
from .workers.controller import register as register_workers

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logger(getattr(settings, "LOG_LEVEL", "INFO"))

    storage_backend = getattr(settings, "STORAGE_BACKEND", "json")
    data_dir = getattr(settings, "DATA_DIR", "data")
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info("settings=%s storage=%s", settings_module, storage_backend)

    container = build_container(
        storage_backend=storage_backend,
        data_dir=data_dir,
        db_config=db_config,
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    app.extensions["container_payroll"] = container
    atexit.register(container.close)

    register_workers(app, container)
    register_teams(app, container)
    register_ledger(app, container)
    register_payroll(app, container)

    return app
