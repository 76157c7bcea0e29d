"""CalendarFields value type.

This module provides the civil-calendar decomposition of a single epoch
instant. Instances are produced by the epoch converter and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

from epochal._internal.calendar import day_of_week as weekday_of
from epochal.errors import InvalidArgumentError
from epochal.units.weekday import Weekday


@dataclass(frozen=True)
class CalendarFields:
    """Civil calendar fields derived from one epoch and one UTC offset.

    Month and day are 0-based indexes, the way the converter walks them;
    renderers add one when displaying them.

    epoch_to_fields() is the usual way to obtain one. Built directly, the
    date, time and weekday are checked: day_of_week must be the weekday of
    the date, since it is derived and never set on its own.

    Attributes:
        year: Proleptic Gregorian year (can be 0 or negative).
        month: Month index, 0-11.
        day: Day-of-month index, 0 to days_in_month - 1.
        hour: Hour, 0-23.
        minute: Minute, 0-59.
        second: Second, 0-59.
        day_of_week: Weekday of (year, month + 1, day + 1).
        utc_offset_hours: The fractional-hour offset the fields were shifted by.

    Examples:
        >>> from epochal.convert import epoch_to_fields
        >>> fields = epoch_to_fields(0)
        >>> fields.year, fields.month, fields.day
        (1970, 0, 0)
        >>> fields.day_of_week
        <Weekday.THURSDAY: 4>
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    day_of_week: Weekday
    utc_offset_hours: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise InvalidArgumentError(f"hour must be 0-23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidArgumentError(f"minute must be 0-59, got {self.minute}")
        if not 0 <= self.second <= 59:
            raise InvalidArgumentError(f"second must be 0-59, got {self.second}")

        expected = weekday_of(self.year, self.month + 1, self.day + 1)
        if self.day_of_week is not expected:
            raise InvalidArgumentError(
                f"day_of_week {self.day_of_week} does not match "
                f"{self.year}-{self.month + 1:02d}-{self.day + 1:02d} ({expected})"
            )

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """Return (year, month, day, hour, minute, second) with 1-based month and day."""
        return (
            self.year,
            self.month + 1,
            self.day + 1,
            self.hour,
            self.minute,
            self.second,
        )


__all__ = ["CalendarFields"]
