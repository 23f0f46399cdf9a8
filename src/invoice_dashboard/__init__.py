"""Invoice Dashboard package.

This package is organized by feature modules (invoices, customers, revenue,
users, dashboard) with a thin Flask controller layer over service and
repository layers.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from .common.formatting import format_currency, format_date_to_local
from .config import get_settings_module
from .container import build_container
from .core.enums import PageCountMode
from .core.exceptions import DataUnavailableError
from .customers.controller import register as register_customers
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import create_schema, ensure_database_exists, seed_demo_data
from .database.connection import describe_database, init_db
from .extensions import db, login_manager
from .invoices.controller import register as register_invoices
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(app: Flask) -> None:
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format=app.config.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(error):
        return render_template("not_found.html"), 404

    @app.errorhandler(DataUnavailableError)
    def data_unavailable(error: DataUnavailableError):
        # The message is generic by construction; the cause was logged where it happened.
        return render_template("error.html"), 500


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    configure_logging(app)

    if app.config.get("DEBUG"):
        logger.info(
            "settings=%s db=%s", settings_module, describe_database(app.config["SQLALCHEMY_DATABASE_URI"])
        )

    init_db(app)
    login_manager.init_app(app)

    app.jinja_env.filters["currency"] = format_currency
    app.jinja_env.filters["local_date"] = format_date_to_local

    if app.config.get("AUTO_INIT_DB"):
        ensure_database_exists(app.config["SQLALCHEMY_DATABASE_URI"])
        with app.app_context():
            tables = create_schema(db)
        logger.info("schema ready (tables=%d)", len(tables))
    if app.config.get("AUTO_SEED_DB"):
        with app.app_context():
            seed_demo_data(db)

    container = build_container(
        database=db,
        page_count_mode=PageCountMode(app.config.get("INVOICE_PAGE_COUNT_MODE", PageCountMode.CUSTOMER)),
    )
    app.extensions["container"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_dashboard(app, container)
    register_invoices(app, container)
    register_customers(app, container)

    return app
