"""Tests for day enumeration and classification."""

from datetime import date

import pytest

from daftarhadir.engine.calendar_grid import (
    build_grid_days,
    days_in_range,
    format_column_label,
    format_long_date,
    is_weekend,
)


@pytest.mark.unit
class TestDaysInRange:
    """Inclusive day enumeration."""

    def test_inclusive_count(self):
        """Both ends of the range are included."""
        days = days_in_range(date(2024, 1, 1), date(2024, 1, 31))

        assert len(days) == 31
        assert days[0] == date(2024, 1, 1)
        assert days[-1] == date(2024, 1, 31)

    def test_single_day(self):
        """A range starting and ending on the same day has one column."""
        assert days_in_range(date(2024, 3, 5), date(2024, 3, 5)) == [date(2024, 3, 5)]

    def test_crosses_month_and_leap_day(self):
        """Month boundaries and Feb 29 are counted."""
        days = days_in_range(date(2024, 2, 27), date(2024, 3, 2))

        assert days == [
            date(2024, 2, 27),
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
            date(2024, 3, 2),
        ]

    def test_reversed_range_descends(self):
        """A reversed range lists the same days newest first."""
        days = days_in_range(date(2024, 1, 3), date(2024, 1, 1))

        assert days == [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)]


@pytest.mark.unit
class TestClassification:
    """Weekend and holiday shading."""

    def test_is_weekend(self):
        """Saturday and Sunday are weekend days."""
        assert is_weekend(date(2024, 1, 6))  # Saturday
        assert is_weekend(date(2024, 1, 7))  # Sunday
        assert not is_weekend(date(2024, 1, 5))  # Friday
        assert not is_weekend(date(2024, 1, 8))  # Monday

    def test_shaded_days(self):
        """Weekends and holidays are shaded, other days are not."""
        holidays = {date(2024, 1, 1), date(2024, 1, 10)}
        grid = build_grid_days(date(2024, 1, 1), date(2024, 1, 14), holidays)

        shaded = [grid_day.day.day for grid_day in grid if grid_day.shaded]
        assert shaded == [1, 6, 7, 10, 13, 14]

    def test_holiday_on_weekend(self):
        """A holiday falling on a weekend is flagged both ways and shaded once."""
        grid = build_grid_days(date(2024, 1, 6), date(2024, 1, 6), {date(2024, 1, 6)})

        assert grid[0].weekend and grid[0].holiday
        assert grid[0].shaded

    def test_holidays_outside_range_ignored(self):
        """Holidays outside the range do not add columns."""
        grid = build_grid_days(date(2024, 1, 8), date(2024, 1, 9), {date(2023, 12, 25)})

        assert len(grid) == 2
        assert not any(grid_day.shaded for grid_day in grid)

    def test_indexes_are_sequential(self):
        grid = build_grid_days(date(2024, 1, 1), date(2024, 1, 5), set())

        assert [grid_day.index for grid_day in grid] == [0, 1, 2, 3, 4]


@pytest.mark.unit
class TestDateLabels:
    """Label formatting."""

    def test_column_label(self):
        """Column headers read ``dd MMM yy``."""
        assert format_column_label(date(2024, 1, 5)) == "05 Jan 24"
        assert format_column_label(date(2009, 12, 31)) == "31 Dec 09"

    def test_long_date(self):
        """Signing dates read ``d MMMM yyyy``."""
        assert format_long_date(date(2024, 1, 5)) == "5 January 2024"
        assert format_long_date(date(2024, 11, 30)) == "30 November 2024"

    def test_long_date_missing(self):
        assert format_long_date(None) == ""
