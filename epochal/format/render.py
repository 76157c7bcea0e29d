"""Rendering of CalendarFields through a FormatSpec.

Output is assembled in a fixed sequence:

    [weekday ", "] field delim field delim field " " [h:m:s " "] [AM/PM " "] [±offset " UTC"]

Day and month are shown 1-based; the year is never padded and keeps its
sign. The delimiter after the last order field becomes a single space.

Examples:
    >>> from epochal.convert import epoch_to_fields
    >>> from epochal.format import parse_format
    >>> render(epoch_to_fields(0), parse_format("W, DD/MM/YY, HH:II:SS O UTC"))
    'Thu, 01/01/1970 00:00:00 +00 UTC'
    >>> render(epoch_to_fields(0), parse_format("ww, a.d.y"))
    'Thursday, January.1.1970 '
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from epochal.units.month import month_name
from epochal.units.weekday import weekday_name

if TYPE_CHECKING:
    from epochal.core.fields import CalendarFields
    from epochal.format.spec import FormatSpec


def _number(value: int, fill_zeros: bool) -> str:
    if fill_zeros and 0 <= value < 10:
        return f"0{value}"
    return str(value)


def format_offset(offset_hours: float, fill_zeros: bool = False) -> str:
    """Format a UTC offset as shown after the time section.

    Whole-hour offsets drop the fractional part; other offsets are written
    to six decimal places with trailing zeros removed. Negative offsets carry
    their own minus sign; others get a leading "+".

    Examples:
        >>> format_offset(0, fill_zeros=True)
        '+00 UTC'
        >>> format_offset(5.5, fill_zeros=True)
        '+05.5 UTC'
        >>> format_offset(-8)
        '-8 UTC'
    """
    if float(offset_hours).is_integer():
        text = str(int(offset_hours))
    else:
        text = f"{float(offset_hours):.6f}".rstrip("0").rstrip(".")
    if fill_zeros and 0 <= offset_hours < 10:
        text = f"0{text}"
    sign = "+" if offset_hours >= 0 else ""
    return f"{sign}{text} UTC"


def render(fields: CalendarFields, spec: FormatSpec) -> str:
    """Render calendar fields as text.

    Args:
        fields: The calendar fields to display.
        spec: The rendering configuration.

    Returns:
        The rendered string.

    Raises:
        OutOfRangeError: If the weekday or month index is outside the
            English name tables.
    """
    full = spec.use_full_names
    pad = spec.fill_zeros
    parts: list[str] = []

    if spec.show_day_of_week:
        parts.append(weekday_name(fields.day_of_week.value, full=full) + ", ")

    date_fields = []
    for char in spec.order:
        if char == "d":
            date_fields.append(_number(fields.day + 1, pad))
        elif char == "m":
            date_fields.append(_number(fields.month + 1, pad))
        elif char == "a":
            date_fields.append(month_name(fields.month, full=full))
        elif char == "y":
            date_fields.append(str(fields.year))
    parts.append(spec.delimiter.join(date_fields) + " ")

    if spec.show_time:
        hour = fields.hour
        if spec.use_12_hour:
            hour = fields.hour % 12 or 12
        parts.append(
            f"{_number(hour, pad)}:{_number(fields.minute, pad)}:"
            f"{_number(fields.second, pad)} "
        )
        if spec.use_12_hour:
            parts.append("AM " if fields.hour < 12 else "PM ")

    if spec.show_utc_offset:
        parts.append(format_offset(fields.utc_offset_hours, pad))

    return "".join(parts)


__all__ = ["format_offset", "render"]
