from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def db_session(database: SQLAlchemy, error_message: str, *, commit: bool = False) -> Iterator[Session]:
    """Borrow the request-scoped session and turn store failures into ``DataUnavailableError``.

    Writes are committed when ``commit`` is set; any failure rolls back.
    """
    session = database.session
    try:
        yield session
        if commit:
            session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database Error: %s", error_message)
        raise DataUnavailableError(error_message) from exc
