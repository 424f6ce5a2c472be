"""Day enumeration and classification for the attendance grid."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import AbstractSet, List, Optional

# English month names; labels must not depend on the process locale.
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

SATURDAY = 5
SUNDAY = 6


@dataclass(slots=True, frozen=True)
class GridDay:
    day: date
    index: int
    label: str
    weekend: bool
    holiday: bool

    @property
    def shaded(self) -> bool:
        return self.weekend or self.holiday


def days_in_range(start: date, end: date) -> List[date]:
    """Every calendar day from ``start`` to ``end`` inclusive.

    A reversed range yields the same days in descending order.
    """
    step = 1 if end >= start else -1
    count = abs((end - start).days) + 1
    return [start + timedelta(days=i * step) for i in range(count)]


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def format_column_label(day: date) -> str:
    """``dd MMM yy``, e.g. ``05 Jan 24``."""
    return f"{day.day:02d} {MONTH_NAMES[day.month - 1][:3]} {day.year % 100:02d}"


def format_long_date(day: Optional[date]) -> str:
    """``d MMMM yyyy``, e.g. ``5 January 2024``; empty when unset."""
    if day is None:
        return ""
    return f"{day.day} {MONTH_NAMES[day.month - 1]} {day.year:04d}"


def build_grid_days(start: date, end: date, holidays: AbstractSet[date]) -> List[GridDay]:
    return [
        GridDay(
            day=day,
            index=index,
            label=format_column_label(day),
            weekend=is_weekend(day),
            holiday=day in holidays,
        )
        for index, day in enumerate(days_in_range(start, end))
    ]
