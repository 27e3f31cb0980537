from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: services depend on this interface, not on a concrete database.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> User:
        """Raises DuplicateRecordError when the email is taken."""
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[User]:
        raise NotImplementedError


class TokenRepository(Protocol):
    """Issued access tokens, keyed by JWT id (``jti``)."""

    def store(self, *, jti: str, user_id: int) -> None:
        raise NotImplementedError

    def is_active(self, jti: str) -> bool:
        raise NotImplementedError

    def revoke_all_for_user(self, user_id: int) -> int:
        raise NotImplementedError
