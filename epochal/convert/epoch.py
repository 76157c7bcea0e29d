"""Epoch conversion to civil calendar fields.

This module turns a signed count of Unix seconds plus a fractional-hour UTC
offset into CalendarFields, and parses the textual epoch form accepted by
DateTime.

Functions:
    parse_epoch: Parse decimal epoch text into a signed 64-bit integer.
    epoch_to_fields: Convert epoch seconds and an offset into CalendarFields.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> from epochal.convert import epoch_to_fields, parse_epoch

    >>> parse_epoch("-86400")
    -86400

    >>> epoch_to_fields(-86400).as_tuple()
    (1969, 12, 31, 0, 0, 0)
"""

from __future__ import annotations

import logging
import re

from epochal._internal.calendar import day_of_week, days_in_month, days_in_year
from epochal._internal.constants import (
    DAYS_PER_CYCLE,
    EPOCH_YEAR,
    INT64_MAX,
    INT64_MIN,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    YEARS_PER_CYCLE,
)
from epochal._internal.validation import validate_offset
from epochal.core.fields import CalendarFields
from epochal.errors import InvalidFormatError

logger = logging.getLogger(__name__)

_EPOCH_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_epoch(text: str | int) -> int:
    """Parse epoch text into an integer number of seconds.

    Accepts an optionally signed run of ASCII digits; surrounding
    whitespace is ignored. Python ints are accepted as-is.

    Args:
        text: Decimal epoch text, e.g. "0", "-86400", "+1700000000".

    Returns:
        The epoch in seconds.

    Raises:
        InvalidFormatError: If the text is not an integer or does not fit
            in a signed 64-bit integer.
        TypeError: If text is neither str nor int.

    Examples:
        >>> parse_epoch(" 42 ")
        42
        >>> parse_epoch("4.2")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFormatError: epoch must be a signed decimal integer, got '4.2'
    """
    if isinstance(text, bool) or not isinstance(text, (str, int)):
        raise TypeError(f"epoch must be str or int, got {type(text).__name__}")

    if isinstance(text, int):
        value = text
    else:
        stripped = text.strip()
        if not _EPOCH_PATTERN.match(stripped):
            raise InvalidFormatError(
                f"epoch must be a signed decimal integer, got {text!r}"
            )
        value = int(stripped)

    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidFormatError(
            f"epoch {value} is outside the signed 64-bit range"
        )
    return value


def _walk_years(days: int) -> tuple[int, int]:
    """Walk from EPOCH_YEAR by whole years until days fits in one year.

    Whole 400-year cycles are skipped in one step first; a cycle always
    spans DAYS_PER_CYCLE days, so the result is the same as walking them
    year by year.

    Returns:
        (year, day_of_year) with 0 <= day_of_year < days_in_year(year).
    """
    year = EPOCH_YEAR

    if days >= 0:
        cycles, days = divmod(days, DAYS_PER_CYCLE)
        year += cycles * YEARS_PER_CYCLE
        while days >= days_in_year(year):
            days -= days_in_year(year)
            year += 1
    else:
        cycles = -days // DAYS_PER_CYCLE
        days += cycles * DAYS_PER_CYCLE
        year -= cycles * YEARS_PER_CYCLE
        while days < 0:
            days += days_in_year(year - 1)
            year -= 1

    return year, days


def _walk_months(year: int, days: int) -> tuple[int, int]:
    """Walk months from January until days fits in one month.

    Returns:
        (month, day) as 0-based indexes.
    """
    month = 0
    while days >= days_in_month(year, month):
        days -= days_in_month(year, month)
        month += 1
    return month, days


def epoch_to_fields(epoch: int, offset_hours: float = 0.0) -> CalendarFields:
    """Convert epoch seconds into civil calendar fields.

    The epoch is shifted by the offset (truncated to whole seconds), split
    into whole days and a remainder in [0, 86400) by floor division, and the
    day count is walked through years and then months.

    Args:
        epoch: Seconds since 1970-01-01 00:00:00 UTC (may be negative).
        offset_hours: Fixed UTC offset in fractional hours, e.g. 5.5.

    Returns:
        CalendarFields for the local instant.

    Raises:
        InvalidArgumentError: If offset_hours is not a finite number.

    Examples:
        >>> fields = epoch_to_fields(0, offset_hours=-1)
        >>> fields.as_tuple()
        (1969, 12, 31, 23, 0, 0)
        >>> fields.day_of_week
        <Weekday.WEDNESDAY: 3>
    """
    validate_offset(offset_hours)

    local = epoch + int(offset_hours * SECONDS_PER_HOUR)
    days, remainder = divmod(local, SECONDS_PER_DAY)

    year, days = _walk_years(days)
    month, day = _walk_months(year, days)

    hour, remainder = divmod(remainder, SECONDS_PER_HOUR)
    minute, second = divmod(remainder, SECONDS_PER_MINUTE)

    fields = CalendarFields(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        day_of_week=day_of_week(year, month + 1, day + 1),
        utc_offset_hours=offset_hours,
    )
    logger.debug("converted epoch %d (offset %s) to %r", epoch, offset_hours, fields)
    return fields


__all__ = [
    "parse_epoch",
    "epoch_to_fields",
]
