"""Tests for calendar math: leap years, month lengths, day of week."""

from __future__ import annotations

import datetime as _datetime

import pytest

from epochal._internal.calendar import (
    day_of_week,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from epochal.errors import InvalidArgumentError
from epochal.units.weekday import Weekday


class TestIsLeapYear:
    """Tests for is_leap_year."""

    @pytest.mark.parametrize(
        "year",
        [0, 4, 1600, 1972, 2000, 2024, -4, -400, -800, 400],
    )
    def test_leap_years(self, year: int) -> None:
        """Known leap years, including year 0 and negative years."""
        assert is_leap_year(year) is True

    @pytest.mark.parametrize(
        "year",
        [1, 1900, 2100, 2023, 1970, -1, -100, -200, -1900, 100],
    )
    def test_common_years(self, year: int) -> None:
        """Known common years, including negative centuries."""
        assert is_leap_year(year) is False

    def test_matches_stdlib_for_ce_years(self) -> None:
        """Agrees with the standard library for years 1-9999."""
        import calendar

        for year in range(1, 10000):
            assert is_leap_year(year) == calendar.isleap(year), year

    def test_days_in_year(self) -> None:
        """days_in_year follows is_leap_year."""
        assert days_in_year(2000) == 366
        assert days_in_year(1900) == 365
        assert days_in_year(0) == 366
        assert days_in_year(-1) == 365


class TestDaysInMonth:
    """Tests for days_in_month with 0-based months."""

    def test_fixed_table(self) -> None:
        """Common-year month lengths."""
        expected = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        assert [days_in_month(2023, m) for m in range(12)] == expected

    @pytest.mark.parametrize("year", [-400, -100, -4, 0, 1900, 1972, 2000, 2023, 2100])
    def test_february_follows_leap_rule(self, year: int) -> None:
        """February has 29 days exactly in leap years."""
        expected = 29 if is_leap_year(year) else 28
        assert days_in_month(year, 1) == expected

    def test_leap_year_only_changes_february(self) -> None:
        """Other months are unaffected by leap years."""
        for month in range(12):
            if month == 1:
                continue
            assert days_in_month(2024, month) == days_in_month(2023, month)

    @pytest.mark.parametrize("month", [-1, 12, 13, 100])
    def test_invalid_month(self, month: int) -> None:
        """Month index outside 0-11 raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            days_in_month(2024, month)


class TestDayOfWeek:
    """Tests for day_of_week with 1-based month and day."""

    def test_unix_epoch_is_thursday(self) -> None:
        """1970-01-01 is a Thursday."""
        assert day_of_week(1970, 1, 1) is Weekday.THURSDAY

    def test_millennium_is_saturday(self) -> None:
        """2000-01-01 is a Saturday."""
        assert day_of_week(2000, 1, 1) is Weekday.SATURDAY

    def test_leap_day_1600(self) -> None:
        """1600-02-29 shares its weekday with 2000-02-29 (400-year cycle)."""
        reference = _datetime.date(1600, 2, 29).weekday()  # Monday=0
        assert day_of_week(1600, 2, 29).value == (reference + 1) % 7
        assert day_of_week(1600, 2, 29) is Weekday.TUESDAY
        assert day_of_week(2000, 2, 29) is Weekday.TUESDAY

    def test_december_31_1969(self) -> None:
        """The day before the Unix epoch is a Wednesday."""
        assert day_of_week(1969, 12, 31) is Weekday.WEDNESDAY

    def test_matches_stdlib_over_range(self) -> None:
        """Agrees with the standard library for every 97th day of years 1-9999."""
        for ordinal in range(1, _datetime.date.max.toordinal() + 1, 97):
            date = _datetime.date.fromordinal(ordinal)
            expected = (date.weekday() + 1) % 7
            assert day_of_week(date.year, date.month, date.day).value == expected, date

    def test_last_representable_stdlib_date(self) -> None:
        """9999-12-31 is a Friday."""
        assert day_of_week(9999, 12, 31) is Weekday.FRIDAY

    def test_negative_years_repeat_every_400_years(self) -> None:
        """Weekdays repeat with the 146097-day Gregorian cycle."""
        for year, month, day in [(1, 1, 1), (4, 2, 29), (100, 3, 1), (399, 12, 31)]:
            assert day_of_week(year - 400, month, day) is day_of_week(year, month, day)
            assert day_of_week(year - 800, month, day) is day_of_week(year, month, day)

    def test_year_zero(self) -> None:
        """0000-01-01 is a Saturday (400 years before 0400-01-01)."""
        assert day_of_week(0, 1, 1) is day_of_week(400, 1, 1)
        assert day_of_week(0, 1, 1) is Weekday.SATURDAY

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month: int) -> None:
        """Month outside 1-12 raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            day_of_week(2024, month, 1)

    @pytest.mark.parametrize(
        "year,month,day",
        [(2023, 2, 29), (2024, 2, 30), (2024, 4, 31), (2024, 1, 0), (2024, 1, 32)],
    )
    def test_invalid_day(self, year: int, month: int, day: int) -> None:
        """Day outside the month raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            day_of_week(year, month, day)

    def test_leap_day_accepted_in_leap_year(self) -> None:
        """February 29 is valid in a leap year."""
        assert day_of_week(2024, 2, 29) is Weekday.THURSDAY
