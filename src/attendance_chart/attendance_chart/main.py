from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_REPORT_TITLE
from .dashboard.controller import register as register_dashboard


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logger = logging.getLogger(__name__)
    logger.info(
        "settings=%s students=%s attendance=%s",
        settings_module,
        api_config.get("students_url"),
        api_config.get("attendance_url"),
    )

    if container is None:
        container = build_container(
            api_config=api_config,
            title=getattr(settings, "REPORT_TITLE", DEFAULT_REPORT_TITLE),
        )

    register_dashboard(app, container)

    return app
