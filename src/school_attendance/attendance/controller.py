from __future__ import annotations

from dataclasses import asdict
from urllib.parse import unquote_plus

from flask import Flask, jsonify, request

from ..common.decorators import current_principal, role_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    @role_required(Role.TEACHER)
    def mark_attendance():
        data = request.get_json(silent=True)
        entries = data.get("attendances") if isinstance(data, dict) else None
        container.attendance_service.mark_attendance(current_principal(), entries)
        return jsonify({"message": "Attendance marked successfully"})

    @app.route("/student-report/<int:student_id>", methods=["GET"], endpoint="student_report")
    @role_required(Role.ADMIN, Role.TEACHER)
    def student_report(student_id: int):
        report = container.attendance_service.student_report(student_id)
        return jsonify(
            {
                "attendances": [
                    {"date": day.strftime("%Y-%m-%d"), "status": status.value}
                    for day, status in report.attendances
                ],
                "summary": report.summary.format(),
            }
        )

    @app.route("/class-report/<path:class_grade>/<month>", methods=["GET"], endpoint="class_report")
    @role_required(Role.ADMIN, Role.TEACHER)
    def class_report(class_grade: str, month: str):
        report = container.attendance_service.class_report(unquote_plus(class_grade), month)
        return jsonify(asdict(report))
