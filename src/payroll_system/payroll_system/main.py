from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.logging import configure_logging
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("starting payroll-system with settings=%s", settings_module)

    container = build_container(
        forced_overtime_regular_minutes=int(getattr(settings, "FORCED_OVERTIME_REGULAR_MINUTES", 60)),
        default_currency=str(getattr(settings, "DEFAULT_CURRENCY", "MXN")),
    )
    app.extensions["payroll_container"] = container

    register_payroll(app, container)

    return app
