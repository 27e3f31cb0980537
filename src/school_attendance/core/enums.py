from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles used for route gating."""

    ADMIN = "admin"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Attendance status stored in the ledger."""

    PRESENT = "present"
    ABSENT = "absent"
