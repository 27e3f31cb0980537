from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import FieldErrors, require_string
from ..core.constants import CLASS_GRADE_MAX_LENGTH, NAME_MAX_LENGTH
from ..core.exceptions import ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: maintain the student directory (admin registers, everyone reads)."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def register_student(self, payload: dict) -> Student:
        errors = FieldErrors()
        data = payload if isinstance(payload, dict) else {}
        name = require_string(errors, data, "name", max_length=NAME_MAX_LENGTH)
        class_grade = require_string(errors, data, "class_grade", max_length=CLASS_GRADE_MAX_LENGTH)
        if errors:
            raise ValidationError("The given data was invalid.", errors.as_dict())

        student = self._students.create(name=name, class_grade=class_grade)
        logger.info("Registered student %s in class %r", student.student_id, student.class_grade)
        return student

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def students_in_class(self, class_grade: str) -> Sequence[Student]:
        return self._students.list_by_class(class_grade)
