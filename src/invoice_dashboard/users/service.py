from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash

from ..common.validators import require_email, require_min_length
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import ValidationError
from .model import Principal
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: verify sign-in credentials.

    ``authorize`` is the callback the session layer calls. Every rejection
    returns ``None`` so callers cannot tell a malformed email, an unknown
    user and a wrong password apart. Store failures still raise.
    """

    def __init__(self, users: UserRepository, *, min_password_length: int = MIN_PASSWORD_LENGTH):
        self._users = users
        self._min_password_length = int(min_password_length)

    def authorize(self, credentials: Mapping[str, Any]) -> Optional[Principal]:
        try:
            email = require_email(credentials.get("email"))
            password = require_min_length(credentials.get("password") or "", "Password", self._min_password_length)
        except ValidationError:
            logger.info("Invalid credentials")
            return None

        user = self._users.get_by_email(email)
        if not user:
            logger.info("Invalid credentials")
            return None

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or an unknown hash method
            ok = False

        if not ok:
            logger.info("Invalid credentials")
            return None

        return Principal(id=user.id, name=user.name, email=user.email)

    def load_principal(self, user_id: str) -> Optional[Principal]:
        """Rebuild the principal from the id Flask-Login stored in the session cookie."""
        try:
            uid = int(user_id)
        except (TypeError, ValueError):
            return None
        user = self._users.get_by_id(uid)
        if not user:
            return None
        return Principal(id=user.id, name=user.name, email=user.email)
