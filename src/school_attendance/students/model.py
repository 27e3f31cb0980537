from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a registered student. Immutable once created."""

    student_id: int
    name: str
    class_grade: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
