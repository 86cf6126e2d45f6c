from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_DAY_NAMES, DEFAULT_SESSION_HOURS
from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users
from .worktime.controller import register as register_worktime

logger = logging.getLogger("worktime_tracker")

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s db=%s", settings_module, db_config.get("path"))

    container = build_container(
        db_config=db_config,
        session_hours=int(getattr(settings, "SESSION_HOURS", DEFAULT_SESSION_HOURS)),
        week_starts_on=getattr(settings, "WEEK_STARTS_ON", "sunday"),
        day_names=getattr(settings, "DAY_NAMES", DEFAULT_DAY_NAMES),
    )
    app.extensions["worktime_container"] = container
    atexit.register(container.close)

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_demo_users(container.conn)
        logger.info("demo users ready")

    register_users(app, container)
    register_worktime(app, container)
    register_payroll(app, container)

    return app
