from __future__ import annotations

import re
from typing import Any, Optional

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class FieldErrors:
    """Collects per-field messages so a request can report every problem at once."""

    def __init__(self):
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(message)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def as_dict(self) -> dict[str, list[str]]:
        return {field: list(msgs) for field, msgs in self._errors.items()}


def require_string(
    errors: FieldErrors,
    data: dict,
    field: str,
    *,
    max_length: Optional[int] = None,
) -> Optional[str]:
    value = data.get(field)
    if value is None or (isinstance(value, str) and not value.strip()):
        errors.add(field, f"The {field} field is required.")
        return None
    if not isinstance(value, str):
        errors.add(field, f"The {field} field must be a string.")
        return None

    value = value.strip()
    if max_length is not None and len(value) > max_length:
        errors.add(field, f"The {field} field must not be greater than {max_length} characters.")
        return None
    return value


def require_email(errors: FieldErrors, data: dict, field: str = "email") -> Optional[str]:
    value = require_string(errors, data, field)
    if value is None:
        return None
    if not _EMAIL_RE.match(value):
        errors.add(field, f"The {field} field must be a valid email address.")
        return None
    return value.lower()


def require_min_length(errors: FieldErrors, data: dict, field: str, min_len: int) -> Optional[str]:
    value = data.get(field)
    if not value or not isinstance(value, str):
        errors.add(field, f"The {field} field is required.")
        return None
    if len(value) < min_len:
        errors.add(field, f"The {field} field must be at least {min_len} characters.")
        return None
    return value


def parse_id(value: Any) -> Optional[int]:
    """Accept positive ints and digit strings; reject everything else (including bools)."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        parsed = int(value.strip())
        return parsed if parsed > 0 else None
    return None
