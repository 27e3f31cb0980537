from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.constants import STUDENT_SUMMARY_TEMPLATE
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one ledger row, at most one per (student, date)."""

    attendance_id: int
    student_id: int
    attendance_date: date
    status: AttendanceStatus
    marked_by_teacher_id: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class MarkEntry:
    """A validated item of a mark-attendance request."""

    student_id: int
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    total_days: int
    present: int
    absent: int

    def format(self) -> str:
        """Compatibility text used by the student-report endpoint."""
        return STUDENT_SUMMARY_TEMPLATE.format(total=self.total_days, present=self.present, absent=self.absent)


@dataclass(frozen=True)
class StudentReport:
    attendances: list[tuple[date, AttendanceStatus]]
    summary: AttendanceSummary


@dataclass(frozen=True)
class StudentMonthRow:
    name: str
    present_days: int
    absent_days: int
    attendance_percentage: int


@dataclass(frozen=True)
class ClassSummary:
    total_students: int = 0
    total_days: int = 0
    average_attendance: int = 0
    total_absences: int = 0


@dataclass(frozen=True)
class ClassReport:
    summary: ClassSummary = field(default_factory=ClassSummary)
    students: list[StudentMonthRow] = field(default_factory=list)
