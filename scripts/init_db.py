from __future__ import annotations

from invoice_dashboard import create_app
from invoice_dashboard.database.bootstrap import create_schema, ensure_database_exists
from invoice_dashboard.database.connection import describe_database, shutdown_db
from invoice_dashboard.extensions import db


def main() -> None:
    app = create_app()
    uri = app.config["SQLALCHEMY_DATABASE_URI"]

    ensure_database_exists(uri)
    with app.app_context():
        tables = create_schema(db)
    shutdown_db(app)

    print(f"OK: Created schema -> {describe_database(uri)} (tables={len(tables)})")


if __name__ == "__main__":
    main()
