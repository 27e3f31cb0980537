from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import TokenRepository


class MySQLTokenRepository(TokenRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def store(self, *, jti: str, user_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO auth_tokens(jti, user_id) VALUES(%s,%s)", (jti, int(user_id)))

    def is_active(self, jti: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT revoked_at FROM auth_tokens WHERE jti=%s", (jti,))
            row = fetchone(cur)
            return row is not None and row.get("revoked_at") is None

    def revoke_all_for_user(self, user_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE auth_tokens SET revoked_at=CURRENT_TIMESTAMP WHERE user_id=%s AND revoked_at IS NULL",
                (int(user_id),),
            )
            return int(cur.rowcount)
