"""Calendar utilities for Epochal.

Leap-year logic, month lengths and the day-of-week congruence for the
proleptic Gregorian calendar. Year 0 and negative years follow the same
modular leap-year rule as positive years.

This module is not part of the public API.
"""

from __future__ import annotations

from epochal._internal.constants import DAYS_IN_MONTH
from epochal._internal.validation import (
    validate_day,
    validate_month,
    validate_month_index,
)
from epochal.units.weekday import Weekday


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The 0-based month index (0 = January).

    Returns:
        Number of days in the month.

    Raises:
        InvalidArgumentError: If month is not in 0-11.

    Examples:
        >>> days_in_month(2024, 1)
        29
        >>> days_in_month(2023, 1)
        28
    """
    validate_month_index(month)

    if month == 1 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def day_of_week(year: int, month: int, day: int) -> Weekday:
    """Return the weekday of a calendar date.

    Uses Zeller's congruence with January and February counted as months
    13 and 14 of the previous year. ``year % 100`` and ``year // 100`` floor
    toward negative infinity, which keeps the congruence valid for year 0
    and negative years.

    Args:
        year: The year (astronomical numbering).
        month: The 1-based month (1-12).
        day: The 1-based day of the month.

    Returns:
        The Weekday of the date.

    Raises:
        InvalidArgumentError: If month or day is out of range.

    Examples:
        >>> day_of_week(1970, 1, 1)
        <Weekday.THURSDAY: 4>
        >>> day_of_week(2000, 1, 1)
        <Weekday.SATURDAY: 6>
    """
    validate_month(month)
    validate_day(year, month, day)

    if month < 3:
        month += 12
        year -= 1

    k = year % 100
    j = year // 100
    h = (day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7

    # Zeller counts from Saturday = 0
    return Weekday((h - 1 + 7) % 7)


__all__ = [
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "day_of_week",
]
