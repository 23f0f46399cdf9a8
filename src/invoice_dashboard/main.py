from __future__ import annotations

from . import create_app
from .database.connection import shutdown_db


def main() -> None:
    app = create_app()
    try:
        app.run(debug=bool(app.config.get("DEBUG", False)))
    finally:
        shutdown_db(app)


if __name__ == "__main__":
    main()
