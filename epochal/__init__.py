"""Epochal: Unix timestamps to calendar fields and formatted text.

Epochal converts signed Unix epoch seconds (including dates before 1970)
into proleptic Gregorian calendar fields under a fixed UTC offset, and
renders them through a compact, case-insensitive token format.

Core Types:
    DateTime: Epoch facade with accessors, comparison and arithmetic
    CalendarFields: Civil fields derived from one epoch and one offset
    FormatSpec: Parsed rendering configuration

Units:
    Weekday: Sunday-based day of week
    Month: 0-indexed calendar month

Functions:
    epoch_to_fields: Convert epoch seconds to CalendarFields
    parse_epoch: Parse epoch text
    parse_format: Parse a format string into a FormatSpec
    render: Render CalendarFields through a FormatSpec
    is_leap_year, days_in_month, day_of_week: Calendar math

Exceptions:
    EpochalError: Base exception
    InvalidFormatError: Unparseable epoch or format text
    InvalidArgumentError: Calendar argument out of range
    OutOfRangeError: Name-table index out of range
    DomainError: Division by a zero epoch

Example:
    >>> from epochal import DateTime
    >>> dt = DateTime("1700000000", offset_hours=-5)
    >>> dt.to_string("ww, a-d-y _ h:i:s o")
    'Tuesday, November-14-2023 5:13:20 PM -5 UTC'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Calendar math
from epochal._internal.calendar import day_of_week, days_in_month, is_leap_year
from epochal._internal.constants import DEFAULT_FORMAT

# Core types
from epochal.core.datetime import DateTime
from epochal.core.fields import CalendarFields

# Conversion and formatting
from epochal.convert import epoch_to_fields, parse_epoch
from epochal.format import FormatSpec, parse_format, render

# Units
from epochal.units.month import Month
from epochal.units.weekday import Weekday

# Exceptions
from epochal.errors import (
    DomainError,
    EpochalError,
    InvalidArgumentError,
    InvalidFormatError,
    OutOfRangeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    "DEFAULT_FORMAT",
    # Core types
    "CalendarFields",
    "DateTime",
    "FormatSpec",
    # Units
    "Month",
    "Weekday",
    # Functions
    "day_of_week",
    "days_in_month",
    "epoch_to_fields",
    "is_leap_year",
    "parse_epoch",
    "parse_format",
    "render",
    # Exceptions
    "EpochalError",
    "InvalidFormatError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DomainError",
]
