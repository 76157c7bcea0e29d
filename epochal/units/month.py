"""Month enumeration.

Months are 0-indexed to match CalendarFields: January = 0, December = 11.
"""

from __future__ import annotations

from enum import Enum

from epochal._internal.constants import SHORT_NAME_LENGTH
from epochal.errors import OutOfRangeError

_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class Month(Enum):
    """Calendar month, 0-indexed."""

    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11

    @property
    def full_name(self) -> str:
        return month_name(self.value, full=True)

    @property
    def short_name(self) -> str:
        return month_name(self.value)


def month_name(index: int, full: bool = False) -> str:
    """Look up a month name by its 0-based index.

    Args:
        index: Month index, 0 (January) to 11 (December).
        full: Return the full name instead of the three-letter one.

    Raises:
        OutOfRangeError: If index is outside the name table.

    Examples:
        >>> month_name(8)
        'Sep'
        >>> month_name(8, full=True)
        'September'
    """
    if index < 0 or index >= len(_MONTH_NAMES):
        raise OutOfRangeError(f"month index must be 0-11, got {index}")
    name = _MONTH_NAMES[index]
    return name if full else name[:SHORT_NAME_LENGTH]


__all__ = ["Month", "month_name"]
