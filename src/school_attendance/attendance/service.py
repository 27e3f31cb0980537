from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import parse_year_month, percentage, today_local
from ..common.validators import FieldErrors, parse_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import (
    AlreadyMarkedError,
    DomainError,
    DuplicateRecordError,
    ServerError,
    ValidationError,
)
from ..students.repository import StudentRepository
from ..users.model import Principal
from .ledger import AttendanceLedger
from .model import (
    AttendanceSummary,
    ClassReport,
    ClassSummary,
    MarkEntry,
    StudentMonthRow,
    StudentReport,
)

logger = logging.getLogger(__name__)

ALREADY_MARKED_MESSAGE = "Attendance already marked for today"


class AttendanceService:
    """Marks daily attendance and builds student/class reports.

    Marking is check-then-append per entry, in request order. The first
    duplicate aborts the batch; entries appended before it stay recorded.
    """

    def __init__(self, ledger: AttendanceLedger, students: StudentRepository):
        self._ledger = ledger
        self._students = students

    # ----- marking -----

    def _validate_entries(self, entries: Any) -> list[MarkEntry]:
        errors = FieldErrors()
        if not isinstance(entries, list) or not entries:
            errors.add("attendances", "The attendances field is required.")
            raise ValidationError("The given data was invalid.", errors.as_dict())

        parsed: list[tuple[int, Optional[int], Optional[AttendanceStatus]]] = []
        for index, entry in enumerate(entries):
            prefix = f"attendances.{index}"
            if not isinstance(entry, dict):
                errors.add(prefix, f"The {prefix} field must be an object.")
                continue

            student_id = parse_id(entry.get("student_id"))
            if student_id is None:
                errors.add(f"{prefix}.student_id", f"The {prefix}.student_id field is required.")

            status = None
            try:
                status = AttendanceStatus(entry.get("status"))
            except ValueError:
                errors.add(f"{prefix}.status", f"The selected {prefix}.status is invalid.")

            parsed.append((index, student_id, status))

        requested = [sid for _, sid, _ in parsed if sid is not None]
        try:
            known = self._students.existing_ids(requested)
        except DomainError:
            raise
        except Exception as exc:
            logger.exception("Student lookup failed while marking attendance, students=%s", requested)
            raise ServerError("Server error while marking attendance") from exc

        for index, student_id, _ in parsed:
            if student_id is not None and student_id not in known:
                errors.add(
                    f"attendances.{index}.student_id",
                    f"The selected attendances.{index}.student_id is invalid.",
                )

        if errors:
            raise ValidationError("The given data was invalid.", errors.as_dict())
        return [MarkEntry(student_id=sid, status=status) for _, sid, status in parsed]

    def mark_attendance(self, principal: Principal, entries: Any, *, today: Optional[date] = None) -> int:
        """Record today's status for each entry; returns the number of records written."""

        marks = self._validate_entries(entries)
        today = today or today_local()

        written = 0
        try:
            for mark in marks:
                if self._ledger.record_exists(mark.student_id, today):
                    raise DuplicateRecordError(f"student {mark.student_id} already marked on {today}")
                self._ledger.append(
                    student_id=mark.student_id,
                    on_date=today,
                    status=mark.status,
                    teacher_id=principal.user_id,
                )
                written += 1
        except DuplicateRecordError as exc:
            logger.warning(
                "Mark attendance aborted after %d of %d entries by teacher %s: %s",
                written,
                len(marks),
                principal.user_id,
                exc,
            )
            raise AlreadyMarkedError(ALREADY_MARKED_MESSAGE) from exc
        except DomainError:
            raise
        except Exception as exc:
            logger.exception(
                "Mark attendance failed for teacher %s, students=%s",
                principal.user_id,
                [m.student_id for m in marks],
            )
            raise ServerError("Server error while marking attendance") from exc

        logger.info("Teacher %s marked %d students for %s", principal.user_id, written, today)
        return written

    # ----- reports -----

    def student_report(self, student_id: int) -> StudentReport:
        try:
            records = self._ledger.records_for_student(student_id)
        except Exception as exc:
            logger.exception("Student report failed for student_id=%s", student_id)
            raise ServerError("Server error while fetching student report") from exc

        total = len(records)
        present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
        return StudentReport(
            attendances=[(r.attendance_date, r.status) for r in records],
            summary=AttendanceSummary(total_days=total, present=present, absent=total - present),
        )

    def class_report(self, class_grade: str, month: str) -> ClassReport:
        """Monthly report for one class label.

        ``total_days`` counts distinct dates on which anything was recorded for
        the class. The class average is computed over attendance slots
        (students x total_days): a slot without a record counts as present,
        only recorded absences lower it.
        """

        logger.info("Class report request: class_grade=%r, month=%r", class_grade, month)
        year_month = parse_year_month(month)

        try:
            students = self._students.list_by_class(class_grade)
            if not students:
                logger.warning("No students found for class_grade=%r", class_grade)
                return ClassReport()

            records = self._ledger.records_for_students_in_month(
                [s.student_id for s in students], year_month
            )
            logger.info("Found %d attendance records for %r in %s", len(records), class_grade, year_month)

            total_days = len({r.attendance_date for r in records})
            counts = Counter((r.student_id, r.status) for r in records)

            rows: list[StudentMonthRow] = []
            total_absences = 0
            for student in students:
                present_days = counts[(student.student_id, AttendanceStatus.PRESENT)]
                absent_days = counts[(student.student_id, AttendanceStatus.ABSENT)]
                rows.append(
                    StudentMonthRow(
                        name=student.name,
                        present_days=present_days,
                        absent_days=absent_days,
                        attendance_percentage=percentage(present_days, total_days),
                    )
                )
                total_absences += absent_days

            slots = len(students) * total_days
            summary = ClassSummary(
                total_students=len(students),
                total_days=total_days,
                average_attendance=percentage(slots - total_absences, slots),
                total_absences=total_absences,
            )
            return ClassReport(summary=summary, students=rows)
        except Exception as exc:
            logger.exception("Class report failed: class_grade=%r, month=%s", class_grade, year_month)
            raise ServerError("Server error while fetching class report") from exc
