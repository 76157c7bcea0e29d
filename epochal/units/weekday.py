"""Weekday enumeration.

Weekdays are numbered from Sunday = 0 to Saturday = 6.
"""

from __future__ import annotations

from enum import Enum

from epochal._internal.constants import SHORT_NAME_LENGTH
from epochal.errors import OutOfRangeError

_WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


class Weekday(Enum):
    """Day of the week, Sunday-based.

    Examples:
        >>> Weekday.THURSDAY.full_name
        'Thursday'
        >>> Weekday.THURSDAY.short_name
        'Thu'
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def full_name(self) -> str:
        """Return the English name, e.g. "Wednesday"."""
        return weekday_name(self.value, full=True)

    @property
    def short_name(self) -> str:
        """Return the first three letters of the English name."""
        return weekday_name(self.value)


def weekday_name(index: int, full: bool = False) -> str:
    """Look up a weekday name by its Sunday-based index.

    Args:
        index: Weekday index, 0 (Sunday) to 6 (Saturday).
        full: Return the full name instead of the three-letter one.

    Raises:
        OutOfRangeError: If index is outside the name table.
    """
    if index < 0 or index >= len(_WEEKDAY_NAMES):
        raise OutOfRangeError(f"weekday index must be 0-6, got {index}")
    name = _WEEKDAY_NAMES[index]
    return name if full else name[:SHORT_NAME_LENGTH]


__all__ = ["Weekday", "weekday_name"]
