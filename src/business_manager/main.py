from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, send_from_directory

from .activities.controller import register as register_activities
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS, MAX_UPLOAD_BYTES
from .customers.controller import register as register_customers
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_admin_user, list_tables
from .employees.controller import register as register_employees
from .ledger.controller import register as register_ledger
from .reports.controller import register as register_reports
from .users.controller import register as register_users
from .web.errors import register_error_handlers
from .web.guards import login_required

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger("business_manager").setLevel(level)


def _bootstrap_database(app: Flask, settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=PROJECT_ROOT / "database" / "schema.sql")
        app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=PROJECT_ROOT / "database" / "seed.sql")
        ensure_admin_user(
            db_config,
            username=getattr(settings, "ADMIN_USERNAME", None),
            password=getattr(settings, "ADMIN_PASSWORD", None),
        )
        app.logger.info("demo seed ready")


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    """Application factory.

    `container` lets tests run the API against in-memory repositories; the
    database bootstrap is skipped in that case.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    max_upload = int(getattr(settings, "MAX_UPLOAD_BYTES", MAX_UPLOAD_BYTES))
    app.config.update(
        DEBUG=bool(getattr(settings, "DEBUG", False)),
        TESTING=bool(getattr(settings, "TESTING", False)),
        UPLOAD_FOLDER=str(Path(getattr(settings, "UPLOAD_FOLDER", "uploads")).resolve()),
        REPORTS_FOLDER=str(Path(getattr(settings, "REPORTS_FOLDER", "reports")).resolve()),
        MAX_UPLOAD_BYTES=max_upload,
        # Leave room for the other multipart fields around the file.
        MAX_CONTENT_LENGTH=max_upload + 1024 * 1024,
        PERMANENT_SESSION_LIFETIME=timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))),
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
    )
    app.json.ensure_ascii = False

    app.logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        _bootstrap_database(app, settings, db_config)
        container = build_container(db_config=db_config, reports_folder=app.config["REPORTS_FOLDER"])

    register_error_handlers(app)

    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    @login_required
    def uploaded_file(filename: str):
        return send_from_directory(app.config["UPLOAD_FOLDER"], filename)

    register_users(app, container)
    register_dashboard(app, container)
    register_activities(app, container)
    register_customers(app, container)
    register_ledger(app, container)
    register_employees(app, container)
    register_reports(app, container)

    return app
