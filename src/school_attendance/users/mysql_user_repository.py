from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..core.exceptions import DuplicateRecordError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, name, email, password_hash, role, created_at, updated_at"


def _to_user(r: dict) -> User:
    return User(
        user_id=int(r["user_id"]),
        name=r["name"],
        email=r["email"],
        password_hash=r["password_hash"],
        role=Role(r["role"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> User:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users(name, email, password_hash, role) VALUES(%s,%s,%s,%s)",
                    (name, email, password_hash, role.value),
                )
                user_id = int(cur.lastrowid)
                cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
                return _to_user(fetchone(cur))
        except Exception as exc:
            if is_duplicate_key(exc):
                raise DuplicateRecordError(f"Email {email} is already registered") from exc
            raise

    def list_by_role(self, role: Role) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY user_id ASC", (role.value,))
            return [_to_user(r) for r in fetchall(cur)]
