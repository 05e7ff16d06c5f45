from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .clock.controller import register as register_clock
from .config import get_settings_module
from .container import build_container

logger = logging.getLogger(__name__)


def create_app(settings=None) -> Flask:
    load_dotenv(override=False)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if settings is None:
        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)
    else:
        settings_module = getattr(settings, "__name__", type(settings).__name__)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger.info(
        "[work-hours] settings=%s storage=%s tz=%s",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", "json"),
        getattr(settings, "TIMEZONE", None),
    )

    container = build_container(settings)
    app.extensions["work_hours"] = container

    register_clock(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
