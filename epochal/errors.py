"""Epochal exception hierarchy.

All Epochal-specific exceptions inherit from EpochalError.
"""

from __future__ import annotations


class EpochalError(Exception):
    """Base exception for all Epochal errors."""

    pass


class InvalidFormatError(EpochalError):
    """Failed to interpret a textual input.

    Raised when epoch text is not a signed decimal integer, or when a
    format string does not resolve to exactly three distinct order tokens.

    Examples:
        - Epoch text "12ab" or "" or a value outside the signed 64-bit range
        - Format string "hh:ii:ss" (no day/month/year tokens)
        - Format string "dd/mm" (only two order tokens)
    """

    pass


class InvalidArgumentError(EpochalError):
    """Calendar argument outside its structural range.

    Examples:
        - Month index outside 0-11 passed to days_in_month
        - Day 30 passed to day_of_week for February
        - A UTC offset that is not a finite number
    """

    pass


class OutOfRangeError(EpochalError):
    """A derived index fell outside a fixed name table.

    Indicates an internal invariant violation; calendar fields produced by
    the epoch converter never trigger it.

    Examples:
        - Month index 12 looked up in the month-name table
        - Weekday index 7 looked up in the day-name table
    """

    pass


class DomainError(EpochalError):
    """Arithmetic operation outside its mathematical domain.

    Examples:
        - Dividing a DateTime by a DateTime whose epoch is 0
    """

    pass


__all__ = [
    "EpochalError",
    "InvalidFormatError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DomainError",
]
