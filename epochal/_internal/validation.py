"""Argument guards for Epochal.

This module is not part of the public API.
"""

from __future__ import annotations

import math

from epochal.errors import InvalidArgumentError


def validate_month_index(month: int) -> None:
    """Validate a 0-based month index.

    Args:
        month: The month index (0 = January, 11 = December).

    Raises:
        InvalidArgumentError: If month is outside 0-11.
    """
    if month < 0 or month > 11:
        raise InvalidArgumentError(f"month must be 0-11, got {month}")


def validate_month(month: int) -> None:
    """Validate a 1-based calendar month.

    Raises:
        InvalidArgumentError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidArgumentError(f"month must be 1-12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a 1-based day exists in the given 1-based month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidArgumentError: If day is invalid for the month.
    """
    from epochal._internal.calendar import days_in_month

    max_day = days_in_month(year, month - 1)
    if day < 1 or day > max_day:
        raise InvalidArgumentError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_offset(offset_hours: float) -> None:
    """Validate a fractional-hour UTC offset.

    Raises:
        InvalidArgumentError: If the offset is not a finite real number.
    """
    if isinstance(offset_hours, bool) or not isinstance(offset_hours, (int, float)):
        raise InvalidArgumentError(
            f"offset_hours must be a number, got {type(offset_hours).__name__}"
        )
    if not math.isfinite(offset_hours):
        raise InvalidArgumentError(f"offset_hours must be finite, got {offset_hours}")


__all__ = [
    "validate_month_index",
    "validate_month",
    "validate_day",
    "validate_offset",
]
