from __future__ import annotations

from flask import Flask
from sqlalchemy import event
from sqlalchemy.engine import make_url

from ..extensions import db


def describe_database(uri: str) -> str:
    """Database target for log lines, password hidden."""
    return make_url(uri).render_as_string(hide_password=True)


def _sqlite_case_sensitive_like(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA case_sensitive_like = ON")
    finally:
        cursor.close()


def init_db(app: Flask) -> None:
    """Bind the process-wide engine/pool to the app; sessions are borrowed per request."""
    db.init_app(app)
    with app.app_context():
        # SQLite LIKE ignores ASCII case by default; invoice search must not.
        if db.engine.dialect.name == "sqlite":
            event.listen(db.engine, "connect", _sqlite_case_sensitive_like)


def shutdown_db(app: Flask) -> None:
    """Release pooled connections. Call once when the process stops serving."""
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
