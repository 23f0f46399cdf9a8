import os
import urllib.parse

from ..core.enums import PageCountMode


def database_uri(default_password: str = "") -> str:
    """Build the SQLAlchemy URL from ``DATABASE_URL`` or the ``DB_*`` variables."""
    url = os.environ.get("DATABASE_URL", "").strip()
    if url:
        return url

    user = os.environ.get("DB_USER", "root")
    password = urllib.parse.quote_plus(os.environ.get("DB_PASSWORD", default_password))
    host = os.environ.get("DB_HOST", "localhost")
    port = int(os.environ.get("DB_PORT", "3306"))
    name = os.environ.get("DB_NAME", "invoice_dashboard")
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"


SQLALCHEMY_TRACK_MODIFICATIONS = False

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

INVOICE_PAGE_COUNT_MODE = PageCountMode(os.environ.get("INVOICE_PAGE_COUNT_MODE", PageCountMode.CUSTOMER.value))
