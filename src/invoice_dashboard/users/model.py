from __future__ import annotations

from dataclasses import dataclass

from flask_login import UserMixin


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object; it holds no database access code.
    """

    id: int
    name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class Principal(UserMixin):
    """What the session keeps after login. Never carries the password hash."""

    id: int
    name: str
    email: str

    def get_id(self) -> str:
        return str(self.id)
