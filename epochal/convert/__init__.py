"""Conversion between epoch seconds and calendar fields.

Functions:
    parse_epoch: Parse decimal epoch text into an integer.
    epoch_to_fields: Convert epoch seconds and a UTC offset into CalendarFields.

Examples:
    >>> from epochal.convert import epoch_to_fields
    >>> epoch_to_fields(951782400).as_tuple()
    (2000, 2, 29, 0, 0, 0)
"""

from __future__ import annotations

from epochal.convert.epoch import epoch_to_fields, parse_epoch

__all__: list[str] = [
    "epoch_to_fields",
    "parse_epoch",
]
