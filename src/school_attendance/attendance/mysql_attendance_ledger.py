from __future__ import annotations

from datetime import date
from typing import Collection, Sequence

from ..common.datetime_utils import YearMonth
from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateRecordError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause, is_duplicate_key
from .ledger import AttendanceLedger
from .model import AttendanceRecord

_COLUMNS = "attendance_id, student_id, attendance_date, status, marked_by_teacher_id, created_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        attendance_date=r["attendance_date"],
        status=AttendanceStatus(r["status"]),
        marked_by_teacher_id=int(r["marked_by_teacher_id"]),
        created_at=r.get("created_at"),
    )


class MySQLAttendanceLedger(AttendanceLedger):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def record_exists(self, student_id: int, on_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS hit FROM attendance_records WHERE student_id=%s AND attendance_date=%s LIMIT 1",
                (int(student_id), on_date),
            )
            return fetchone(cur) is not None

    def append(
        self,
        *,
        student_id: int,
        on_date: date,
        status: AttendanceStatus,
        teacher_id: int,
    ) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(student_id, attendance_date, status, marked_by_teacher_id)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(student_id), on_date, status.value, int(teacher_id)),
                )
                attendance_id = int(cur.lastrowid)
        except Exception as exc:
            if is_duplicate_key(exc):
                raise DuplicateRecordError(
                    f"Attendance already recorded for student {student_id} on {on_date}"
                ) from exc
            raise

        return AttendanceRecord(
            attendance_id=attendance_id,
            student_id=int(student_id),
            attendance_date=on_date,
            status=status,
            marked_by_teacher_id=int(teacher_id),
        )

    def records_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE student_id=%s ORDER BY attendance_id ASC",
                (int(student_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def records_for_students_in_month(
        self,
        student_ids: Collection[int],
        year_month: YearMonth,
    ) -> Sequence[AttendanceRecord]:
        ids = sorted({int(i) for i in student_ids})
        if not ids:
            return []

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE student_id IN ({in_clause(ids)})
                  AND attendance_date >= %s AND attendance_date < %s
                ORDER BY attendance_date ASC, attendance_id ASC
                """,
                (*ids, year_month.first_day, year_month.next_first_day),
            )
            return [_to_record(r) for r in fetchall(cur)]
