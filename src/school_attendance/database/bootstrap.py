from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.constants import DEMO_PASSWORD
from ..core.enums import Role
from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

DEMO_USERS = (
    ("Admin", "admin@example.com", Role.ADMIN),
    ("Teacher", "teacher@example.com", Role.TEACHER),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    quote = None
    escape = False

    for ch in sql:
        buf.append(ch)
        if escape:
            escape = False
        elif ch == "\\":
            escape = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf[:-1]).strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    ensure_database_exists(conn_factory)

    sql = _strip_comments(_strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8")))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s to database %s", schema_path, conn_factory.config.database)


def ensure_demo_users(db_config: dict) -> None:
    """Upsert the seeded admin and teacher accounts."""

    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        for name, email, role in DEMO_USERS:
            password_hash = generate_password_hash(DEMO_PASSWORD)
            cur.execute("SELECT user_id FROM users WHERE email=%s", (email,))
            if cur.fetchone():
                cur.execute(
                    "UPDATE users SET name=%s, password_hash=%s, role=%s WHERE email=%s",
                    (name, password_hash, role.value, email),
                )
            else:
                cur.execute(
                    "INSERT INTO users(name, email, password_hash, role) VALUES(%s,%s,%s,%s)",
                    (name, email, password_hash, role.value),
                )
        conn.commit()
    finally:
        conn.close()
    logger.info("Demo users ready: %s", ", ".join(email for _, email, _ in DEMO_USERS))


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
