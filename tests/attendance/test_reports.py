from __future__ import annotations

from datetime import date

import pytest

from school_attendance.attendance.model import ClassSummary
from school_attendance.attendance.service import AttendanceService
from school_attendance.core.enums import AttendanceStatus
from school_attendance.core.exceptions import InvalidMonthError, ServerError
from tests.fakes import BrokenLedger, InMemoryLedger, InMemoryStudents

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT


@pytest.fixture
def students():
    repo = InMemoryStudents()
    repo.add("Ann", "A")
    repo.add("Ben", "A")
    repo.add("Cid", "B")
    return repo


@pytest.fixture
def ledger():
    return InMemoryLedger()


@pytest.fixture
def svc(ledger, students):
    return AttendanceService(ledger, students)


# ----- student report -----


def test_student_report_counts_all_history(svc, ledger):
    ledger.seed(1, date(2025, 8, 29), P)
    ledger.seed(1, date(2025, 9, 1), A)
    ledger.seed(1, date(2025, 9, 2), P)
    ledger.seed(2, date(2025, 9, 2), A)

    report = svc.student_report(1)

    assert report.attendances == [(date(2025, 8, 29), P), (date(2025, 9, 1), A), (date(2025, 9, 2), P)]
    assert report.summary.total_days == 3
    assert report.summary.present == 2
    assert report.summary.absent == 1
    assert report.summary.present + report.summary.absent == report.summary.total_days


def test_student_report_summary_text(svc, ledger):
    ledger.seed(1, date(2025, 9, 1), P)
    ledger.seed(1, date(2025, 9, 2), A)

    assert svc.student_report(1).summary.format() == "Total Days: 2, Present: 1, Absent: 1"


def test_student_without_records_has_zero_summary(svc):
    report = svc.student_report(42)

    assert report.attendances == []
    assert report.summary.format() == "Total Days: 0, Present: 0, Absent: 0"


def test_student_report_is_repeatable(svc, ledger):
    ledger.seed(1, date(2025, 9, 1), P)

    assert svc.student_report(1) == svc.student_report(1)


def test_student_report_store_failure(students):
    with pytest.raises(ServerError):
        AttendanceService(BrokenLedger(), students).student_report(1)


# ----- class report -----


def test_class_report_one_present_one_absent(svc, ledger):
    for day in (1, 2, 3):
        ledger.seed(1, date(2025, 9, day), P)
        ledger.seed(2, date(2025, 9, day), A)

    report = svc.class_report("A", "2025-09")

    assert report.summary == ClassSummary(total_students=2, total_days=3, average_attendance=50, total_absences=3)
    assert [(s.name, s.present_days, s.absent_days, s.attendance_percentage) for s in report.students] == [
        ("Ann", 3, 0, 100),
        ("Ben", 0, 3, 0),
    ]


def test_class_report_ignores_other_months_and_classes(svc, ledger):
    ledger.seed(1, date(2025, 8, 31), A)
    ledger.seed(1, date(2025, 9, 30), P)
    ledger.seed(1, date(2025, 10, 1), A)
    ledger.seed(3, date(2025, 9, 10), A)

    report = svc.class_report("A", "2025-9")

    assert report.summary.total_days == 1
    assert report.summary.total_absences == 0
    assert report.students[0].present_days == 1


def test_total_days_counts_distinct_recorded_dates(svc, ledger):
    ledger.seed(1, date(2025, 9, 1), P)
    ledger.seed(2, date(2025, 9, 1), P)
    ledger.seed(1, date(2025, 9, 2), A)

    report = svc.class_report("A", "2025-09")

    assert report.summary.total_days == 2
    # Ben has no record on the 2nd; that slot counts toward the average as present
    assert report.summary.average_attendance == 75
    assert report.students[1].attendance_percentage == 50


def test_percentages_round_half_up(students):
    ledger = InMemoryLedger()
    for day in range(1, 9):
        ledger.seed(1, date(2025, 9, day), P if day == 1 else A)

    report = AttendanceService(ledger, students).class_report("A", "2025-09")

    # 1/8 = 12.5%
    assert report.students[0].attendance_percentage == 13


def test_class_with_no_students_returns_zero_summary(svc):
    report = svc.class_report("Grade 12", "2025-09")

    assert report.summary == ClassSummary(total_students=0, total_days=0, average_attendance=0, total_absences=0)
    assert report.students == []


def test_class_with_students_but_no_records(svc):
    report = svc.class_report("A", "2025-09")

    assert report.summary == ClassSummary(total_students=2, total_days=0, average_attendance=0, total_absences=0)
    assert [s.attendance_percentage for s in report.students] == [0, 0]


def test_class_label_is_case_sensitive(svc, ledger):
    ledger.seed(1, date(2025, 9, 1), P)

    assert svc.class_report("a", "2025-09").summary.total_students == 0


@pytest.mark.parametrize("month", ["2025-13", "2025-00", "abcd-09", "2025-xx", "2025", "2025-09-01", "", "25-09"])
def test_invalid_month(svc, month):
    with pytest.raises(InvalidMonthError):
        svc.class_report("A", month)


def test_invalid_month_wins_over_empty_class(svc):
    with pytest.raises(InvalidMonthError):
        svc.class_report("Nobody", "2025-13")


def test_class_report_store_failure(students):
    with pytest.raises(ServerError):
        AttendanceService(BrokenLedger(), students).class_report("A", "2025-09")
