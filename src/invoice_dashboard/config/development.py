import os

from .base import INVOICE_PAGE_COUNT_MODE, LOG_FORMAT, LOG_LEVEL, SQLALCHEMY_TRACK_MODIFICATIONS, database_uri

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = database_uri(default_password="123456")

DEBUG = True

# If enabled, the app creates missing tables on startup (create_all is idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
