from __future__ import annotations

import logging
from typing import Sequence

from flask_sqlalchemy import SQLAlchemy

from ..database.models import Revenue
from ..database.session import db_session
from .model import RevenueBucket
from .repository import RevenueRepository

logger = logging.getLogger(__name__)


class SQLRevenueRepository(RevenueRepository):
    def __init__(self, database: SQLAlchemy):
        self._db = database

    def list_all(self) -> Sequence[RevenueBucket]:
        logger.debug("Fetching revenue data...")
        with db_session(self._db, "Failed to fetch revenue data.") as session:
            rows = session.query(Revenue.month, Revenue.revenue).order_by(Revenue.id).all()
            return [RevenueBucket(month=r.month, revenue=int(r.revenue)) for r in rows]
