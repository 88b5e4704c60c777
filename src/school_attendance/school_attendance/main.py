from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.enums import AttendanceStatus
from .gateway.connection import ApiConfig
from .attendance.controller import register as register_attendance
from .maintenance.controller import register as register_maintenance
from .recap.controller import register as register_recap
from .roster.controller import register as register_roster
from .school.controller import register as register_school

logger = logging.getLogger(__name__)


def _unmarked_default(value: str) -> Optional[AttendanceStatus]:
    value = (value or "").strip()
    return AttendanceStatus.parse(value) if value else None


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        api_config = ApiConfig(
            endpoint=getattr(settings, "API_ENDPOINT"),
            timeout=float(getattr(settings, "REQUEST_TIMEOUT")),
            delete_all_timeout=float(getattr(settings, "DELETE_ALL_TIMEOUT")),
        )
        container = build_container(
            api_config=api_config,
            store_path=getattr(settings, "LOCAL_STORE_PATH"),
            unmarked_default=_unmarked_default(getattr(settings, "UNMARKED_STATUS_DEFAULT", "Hadir")),
            place_name=getattr(settings, "DEFAULT_PLACE_NAME"),
        )
    logger.info("settings=%s endpoint=%s", settings_module, container.client.config.endpoint)

    app.extensions["school_attendance"] = container
    register_roster(app, container)
    register_attendance(app, container)
    register_recap(app, container)
    register_school(app, container)
    register_maintenance(app, container)

    return app
