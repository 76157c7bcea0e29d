"""DateTime facade over an epoch and its calendar fields.

This module provides the DateTime class: one Unix epoch (kept as the text
it was given), one fixed UTC offset, and the CalendarFields derived from
them at construction.
"""

from __future__ import annotations

from epochal._internal.constants import DEFAULT_FORMAT
from epochal.convert.epoch import epoch_to_fields, parse_epoch
from epochal.core.fields import CalendarFields
from epochal.errors import DomainError
from epochal.format.render import render
from epochal.format.spec import FormatSpec, parse_format
from epochal.units.weekday import Weekday, weekday_name


class DateTime:
    """A Unix timestamp with civil calendar fields.

    DateTime is immutable. Comparison and arithmetic operators work on the
    epoch integers of both operands and ignore the UTC offsets, since every
    epoch is anchored to UTC. Arithmetic results carry a zero offset.

    Month and day accessors are 0-based indexes, as stored in
    CalendarFields.

    Attributes:
        year: The year (can be 0 or negative).
        month: The month index (0-11).
        day: The day-of-month index (0-30).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        day_of_week: The Weekday.
        offset_utc: The UTC offset in fractional hours.

    Examples:
        >>> dt = DateTime("0")
        >>> str(dt)
        'Thu, 01/01/1970 00:00:00 +00 UTC'

        >>> DateTime("-86400").day_of_week_name(full=True)
        'Wednesday'

        >>> (DateTime("100") + DateTime("50")).to_unix()
        '150'
    """

    __slots__ = ("_unix", "_offset", "_fields")

    def __init__(self, epoch: str | int, offset_hours: float = 0.0) -> None:
        """Create a DateTime from epoch seconds.

        Args:
            epoch: Decimal epoch text (canonical) or an int.
            offset_hours: Fixed UTC offset in fractional hours.

        Raises:
            InvalidFormatError: If epoch is not a signed 64-bit integer.
            InvalidArgumentError: If offset_hours is not a finite number.
            TypeError: If epoch is neither str nor int.
        """
        seconds = parse_epoch(epoch)

        self._unix: str = epoch if isinstance(epoch, str) else str(seconds)
        self._offset: float = offset_hours
        self._fields: CalendarFields = epoch_to_fields(seconds, offset_hours)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def fields(self) -> CalendarFields:
        """Return the calendar fields computed at construction."""
        return self._fields

    @property
    def year(self) -> int:
        return self._fields.year

    @property
    def month(self) -> int:
        return self._fields.month

    @property
    def day(self) -> int:
        return self._fields.day

    @property
    def hour(self) -> int:
        return self._fields.hour

    @property
    def minute(self) -> int:
        return self._fields.minute

    @property
    def second(self) -> int:
        return self._fields.second

    @property
    def day_of_week(self) -> Weekday:
        return self._fields.day_of_week

    @property
    def offset_utc(self) -> float:
        return self._offset

    @property
    def epoch(self) -> int:
        """Return the epoch seconds, re-parsed from the stored text."""
        return parse_epoch(self._unix)

    def to_unix(self) -> str:
        """Return the epoch text exactly as it was given."""
        return self._unix

    def day_of_week_name(self, full: bool = False) -> str:
        """Return the English weekday name.

        Args:
            full: Return "Thursday" rather than "Thu".

        Raises:
            OutOfRangeError: If the weekday index is outside the name table.
        """
        return weekday_name(self._fields.day_of_week.value, full=full)

    # =========================================================================
    # Rendering
    # =========================================================================

    def to_string(self, fmt: str | FormatSpec = DEFAULT_FORMAT) -> str:
        """Render this DateTime.

        Args:
            fmt: A format string (see epochal.format.spec) or a parsed
                FormatSpec.

        Returns:
            The rendered text.

        Raises:
            InvalidFormatError: If fmt is a string that fails to parse.

        Examples:
            >>> DateTime("0").to_string("mm-dd-yyyy")
            '01-01-1970 '
            >>> DateTime("0", 5.5).to_string("d.m.y hh:ii o")
            '01.01.1970 05:30:00 +05.5 UTC'
        """
        spec = fmt if isinstance(fmt, FormatSpec) else parse_format(fmt)
        return render(self._fields, spec)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DateTime({self._unix!r}, offset_hours={self._offset!r})"

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Check equality by epoch seconds, ignoring offsets."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch == other.epoch

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch < other.epoch

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch <= other.epoch

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch > other.epoch

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch >= other.epoch

    def __hash__(self) -> int:
        return hash(self.epoch)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: object) -> DateTime:
        """Add epoch seconds.

        Raises:
            InvalidFormatError: If the sum leaves the signed 64-bit range.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        return DateTime(str(self.epoch + other.epoch))

    def __sub__(self, other: object) -> DateTime:
        if not isinstance(other, DateTime):
            return NotImplemented
        return DateTime(str(self.epoch - other.epoch))

    def __mul__(self, other: object) -> DateTime:
        if not isinstance(other, DateTime):
            return NotImplemented
        return DateTime(str(self.epoch * other.epoch))

    def __truediv__(self, other: object) -> DateTime:
        """Divide epoch seconds, truncating toward zero.

        Raises:
            DomainError: If other has epoch 0.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        numerator = self.epoch
        divisor = other.epoch
        if divisor == 0:
            raise DomainError(f"cannot divide {self!r} by a zero epoch")

        quotient = abs(numerator) // abs(divisor)
        if (numerator < 0) != (divisor < 0):
            quotient = -quotient
        return DateTime(str(quotient))


__all__ = ["DateTime"]
