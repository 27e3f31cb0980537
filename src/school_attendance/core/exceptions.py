from __future__ import annotations

from typing import Mapping, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a field path (``attendances.0.status``) to its messages.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, Sequence[str]]] = None):
        super().__init__(message)
        self.errors = {field: list(msgs) for field, msgs in (errors or {}).items()}


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class DuplicateRecordError(DomainError):
    """Raised by a repository when a unique key (student+date, email) already exists."""


class AlreadyMarkedError(DomainError):
    """Raised when a mark-attendance batch hits an already marked student."""


class InvalidMonthError(DomainError):
    """Raised when a year-month value cannot be parsed."""


class ServerError(DomainError):
    """Unexpected failure; the message is safe to show to clients."""
