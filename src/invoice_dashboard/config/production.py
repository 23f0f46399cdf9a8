import os

from .base import INVOICE_PAGE_COUNT_MODE, LOG_FORMAT, LOG_LEVEL, SQLALCHEMY_TRACK_MODIFICATIONS, database_uri

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SQLALCHEMY_DATABASE_URI = database_uri()

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
