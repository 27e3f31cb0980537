from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from ..core.exceptions import InvalidMonthError

_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: int

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def next_first_day(self) -> date:
        """First day of the following month (exclusive upper bound)."""
        if self.month == 12:
            return date(self.year + 1, 1, 1)
        return date(self.year, self.month + 1, 1)

    def contains(self, value: date) -> bool:
        return self.first_day <= value < self.next_first_day

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def parse_year_month(value: str) -> YearMonth:
    """Parse ``YYYY-M`` or ``YYYY-MM``."""

    match = _YEAR_MONTH_RE.match((value or "").strip())
    if not match:
        raise InvalidMonthError("Invalid month format")

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise InvalidMonthError("Invalid month format")
    return YearMonth(year=year, month=month)


def today_local() -> date:
    """Current server date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return date.today()


def percentage(part: int, whole: int) -> int:
    """``part / whole * 100`` rounded half away from zero; 0 when ``whole`` is 0.

    Integer arithmetic keeps 12.5 -> 13 exact (builtin round() would give 12).
    """

    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)
