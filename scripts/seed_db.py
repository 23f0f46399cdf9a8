from __future__ import annotations

from invoice_dashboard import create_app
from invoice_dashboard.database.bootstrap import seed_demo_data
from invoice_dashboard.database.connection import describe_database, shutdown_db
from invoice_dashboard.extensions import db


def main() -> None:
    app = create_app()

    with app.app_context():
        seed_demo_data(db)
    shutdown_db(app)

    print(f"OK: Seeded database -> {describe_database(app.config['SQLALCHEMY_DATABASE_URI'])}")


if __name__ == "__main__":
    main()
