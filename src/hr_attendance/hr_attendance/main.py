from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.exceptions import ValidationError
from .attendance.controller import register as register_attendance


def _log_level(value) -> int:
    name = str(value or "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValidationError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL (got {value!r})")
    return level


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    log_level = _log_level(getattr(settings, "LOG_LEVEL", "INFO"))
    app.logger.setLevel(log_level)
    logging.getLogger(__package__).setLevel(log_level)

    container = build_container(settings=settings)
    app.extensions["hr_attendance"] = container

    # Active thresholds, so the profile in effect shows up in the logs.
    app.logger.info(
        "settings=%s threshold_profile=%s tardy>=%dmin undertime>=%dmin",
        settings_module,
        getattr(settings, "THRESHOLD_PROFILE", "strict"),
        container.thresholds.tardy_threshold_minutes,
        container.thresholds.undertime_threshold_minutes,
    )

    register_attendance(app, container)

    return app
