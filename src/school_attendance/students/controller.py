from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.decorators import role_required
from ..core.enums import Role
from ..container import Container
from .model import Student


def student_json(student: Student) -> dict:
    return {
        "id": student.student_id,
        "name": student.name,
        "class_grade": student.class_grade,
        "created_at": student.created_at.isoformat() if student.created_at else None,
        "updated_at": student.updated_at.isoformat() if student.updated_at else None,
    }


def register(app: Flask, container: Container) -> None:
    def _register_student(message: str):
        student = container.student_service.register_student(request.get_json(silent=True) or {})
        return jsonify({"message": message, "student": student_json(student)}), 201

    @app.route("/register-student", methods=["POST"], endpoint="register_student")
    @role_required(Role.ADMIN)
    def register_student():
        return _register_student("Student registered successfully")

    @app.route("/students/add", methods=["POST"], endpoint="add_student")
    @role_required(Role.ADMIN)
    def add_student():
        return _register_student("Student added successfully")

    @app.route("/students", methods=["GET"], endpoint="list_students")
    @role_required(Role.ADMIN, Role.TEACHER)
    def list_students():
        return jsonify([student_json(s) for s in container.student_service.list_students()])

    @app.route("/students-by-class/<path:class_grade>", methods=["GET"], endpoint="students_by_class")
    @role_required(Role.TEACHER)
    def students_by_class(class_grade: str):
        students = container.student_service.students_in_class(class_grade)
        return jsonify([student_json(s) for s in students])
