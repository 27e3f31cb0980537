from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Read/append access to the student directory."""

    def existing_ids(self, student_ids: Iterable[int]) -> set[int]:
        """Subset of ``student_ids`` that reference registered students."""
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_class(self, class_grade: str) -> Sequence[Student]:
        """Students whose class label equals ``class_grade`` exactly (case-sensitive)."""
        raise NotImplementedError

    def create(self, *, name: str, class_grade: str) -> Student:
        raise NotImplementedError
