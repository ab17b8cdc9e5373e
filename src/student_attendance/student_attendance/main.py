from __future__ import annotations

import importlib
import logging
import os

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .attendance.controller import register as register_attendance

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    # ATTENDANCE_SEED_FILE in the environment overrides the settings module
    seed_file = os.getenv("ATTENDANCE_SEED_FILE") or getattr(settings, "ATTENDANCE_SEED_FILE", None)
    logger.info("settings=%s seed_file=%s", settings_module, seed_file or "-")

    container = build_container(seed_file=seed_file)
    app.extensions["student_attendance"] = container

    register_attendance(app, container)

    return app
