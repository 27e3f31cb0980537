from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an admin or teacher account.

    Note: plain data object (no DB access code).
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, rebuilt from the access token on every request."""

    user_id: int
    role: Role
