from __future__ import annotations

from typing import Iterable, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Student
from .repository import StudentRepository

_COLUMNS = "student_id, name, class_grade, created_at, updated_at"


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["name"],
        class_grade=r["class_grade"],
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def existing_ids(self, student_ids: Iterable[int]) -> set[int]:
        ids = sorted({int(i) for i in student_ids})
        if not ids:
            return set()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT student_id FROM students WHERE student_id IN ({in_clause(ids)})", tuple(ids))
            return {int(r["student_id"]) for r in fetchall(cur)}

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY student_id ASC")
            return [_to_student(r) for r in fetchall(cur)]

    def list_by_class(self, class_grade: str) -> Sequence[Student]:
        # class_grade column uses a binary collation, so '=' is case-sensitive
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE class_grade=%s ORDER BY student_id ASC",
                (class_grade,),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def create(self, *, name: str, class_grade: str) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO students(name, class_grade) VALUES(%s,%s)", (name, class_grade))
            student_id = int(cur.lastrowid)
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            return _to_student(fetchone(cur))
