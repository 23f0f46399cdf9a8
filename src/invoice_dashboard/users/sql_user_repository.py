from __future__ import annotations

from typing import Optional

from flask_sqlalchemy import SQLAlchemy

from ..database.models import User as UserRow
from ..database.session import db_session
from .model import User
from .repository import UserRepository


class SQLUserRepository(UserRepository):
    def __init__(self, database: SQLAlchemy):
        self._db = database

    @staticmethod
    def _to_user(row: UserRow) -> User:
        return User(id=int(row.id), name=row.name, email=row.email, password_hash=row.password)

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_session(self._db, "Failed to fetch user.") as session:
            row = session.get(UserRow, int(user_id))
            return self._to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_session(self._db, "Failed to fetch user.") as session:
            row = session.query(UserRow).filter_by(email=email).first()
            return self._to_user(row) if row else None
