from __future__ import annotations

from typing import Dict, List, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a form field to the messages shown next to it.
    """

    def __init__(self, message: str, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a record targeted by a change does not exist."""


class DataUnavailableError(DomainError):
    """Raised when the store cannot serve a request.

    The message is fixed per operation; the driver error stays in the logs.
    """
