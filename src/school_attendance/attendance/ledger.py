from __future__ import annotations

from datetime import date
from typing import Collection, Protocol, Sequence

from ..common.datetime_utils import YearMonth
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceLedger(Protocol):
    """Append-only store of attendance records.

    The store enforces one record per (student_id, attendance_date); ``append``
    reports a violation as DuplicateRecordError whether it was caught by the
    pre-check or by the unique key itself.
    """

    def record_exists(self, student_id: int, on_date: date) -> bool:
        raise NotImplementedError

    def append(
        self,
        *,
        student_id: int,
        on_date: date,
        status: AttendanceStatus,
        teacher_id: int,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def records_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        """All records of one student, in insertion order."""
        raise NotImplementedError

    def records_for_students_in_month(
        self,
        student_ids: Collection[int],
        year_month: YearMonth,
    ) -> Sequence[AttendanceRecord]:
        """Records of ``student_ids`` dated within the calendar month."""
        raise NotImplementedError
