from .base import INVOICE_PAGE_COUNT_MODE, LOG_FORMAT, SQLALCHEMY_TRACK_MODIFICATIONS

SECRET_KEY = "test-secret"

SQLALCHEMY_DATABASE_URI = "sqlite://"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
