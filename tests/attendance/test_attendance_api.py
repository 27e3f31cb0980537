from __future__ import annotations

from datetime import date

import pytest

from school_attendance.core.enums import AttendanceStatus

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT


@pytest.fixture
def grade5(students):
    students.add("Ann", "Grade 5")
    students.add("Ben", "Grade 5")
    return students


@pytest.fixture(autouse=True)
def frozen_today(monkeypatch, fixed_today):
    monkeypatch.setattr("school_attendance.attendance.service.today_local", lambda: fixed_today)


def test_mark_attendance(client, teacher_headers, grade5, ledger, fixed_today):
    resp = client.post(
        "/mark-attendance",
        json={"attendances": [{"student_id": 1, "status": "present"}, {"student_id": 2, "status": "absent"}]},
        headers=teacher_headers,
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Attendance marked successfully"}
    assert [(r.student_id, r.attendance_date, r.status) for r in ledger.records] == [
        (1, fixed_today, P),
        (2, fixed_today, A),
    ]
    assert {r.marked_by_teacher_id for r in ledger.records} == {2}


def test_mark_attendance_twice_same_day(client, teacher_headers, grade5, ledger):
    payload = {"attendances": [{"student_id": 1, "status": "present"}]}
    client.post("/mark-attendance", json=payload, headers=teacher_headers)

    resp = client.post("/mark-attendance", json=payload, headers=teacher_headers)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Attendance already marked for today"}
    assert len(ledger.records) == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"attendances": [{"student_id": 1, "status": "late"}]},
        {"attendances": [{"student_id": 99, "status": "present"}]},
        {"attendances": []},
        {},
        ["not", "an", "object"],
    ],
)
def test_mark_attendance_validation(client, teacher_headers, grade5, ledger, payload):
    resp = client.post("/mark-attendance", json=payload, headers=teacher_headers)

    assert resp.status_code == 400
    assert resp.get_json()["errors"]
    assert ledger.records == []


def test_mark_attendance_is_teacher_only(client, admin_headers, grade5):
    resp = client.post(
        "/mark-attendance",
        json={"attendances": [{"student_id": 1, "status": "present"}]},
        headers=admin_headers,
    )

    assert resp.status_code == 403


def test_student_report(client, admin_headers, grade5, ledger):
    ledger.seed(1, date(2025, 9, 1), P)
    ledger.seed(1, date(2025, 9, 2), A)

    resp = client.get("/student-report/1", headers=admin_headers)

    assert resp.status_code == 200
    assert resp.get_json() == {
        "attendances": [
            {"date": "2025-09-01", "status": "present"},
            {"date": "2025-09-02", "status": "absent"},
        ],
        "summary": "Total Days: 2, Present: 1, Absent: 1",
    }


def test_student_report_unknown_student(client, teacher_headers):
    resp = client.get("/student-report/404", headers=teacher_headers)

    assert resp.status_code == 200
    assert resp.get_json() == {"attendances": [], "summary": "Total Days: 0, Present: 0, Absent: 0"}


def test_class_report(client, teacher_headers, grade5, ledger):
    for day in (1, 2, 3):
        ledger.seed(1, date(2025, 9, day), P)
        ledger.seed(2, date(2025, 9, day), A)

    resp = client.get("/class-report/Grade%205/2025-09", headers=teacher_headers)

    assert resp.status_code == 200
    assert resp.get_json() == {
        "summary": {"total_students": 2, "total_days": 3, "average_attendance": 50, "total_absences": 3},
        "students": [
            {"name": "Ann", "present_days": 3, "absent_days": 0, "attendance_percentage": 100},
            {"name": "Ben", "present_days": 0, "absent_days": 3, "attendance_percentage": 0},
        ],
    }


def test_class_report_empty_class(client, admin_headers):
    resp = client.get("/class-report/Grade%2012/2025-09", headers=admin_headers)

    assert resp.status_code == 200
    assert resp.get_json() == {
        "summary": {"total_students": 0, "total_days": 0, "average_attendance": 0, "total_absences": 0},
        "students": [],
    }


def test_class_report_invalid_month(client, admin_headers, grade5):
    resp = client.get("/class-report/Grade%205/2025-13", headers=admin_headers)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid month format"}


def test_class_report_requires_token(client):
    assert client.get("/class-report/Grade%205/2025-09").status_code == 401


def test_class_report_treats_plus_as_space(client, teacher_headers, grade5, ledger):
    ledger.seed(1, date(2025, 9, 1), P)

    resp = client.get("/class-report/Grade+5/2025-09", headers=teacher_headers)

    assert resp.status_code == 200
    assert resp.get_json()["summary"]["total_students"] == 2
