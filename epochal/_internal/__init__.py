"""Internal utilities for Epochal.

This module contains private implementation details:
    - Calendar math (leap years, month lengths, day of week)
    - Argument validation
    - Constants and defaults

Note: This module is not part of the public API.
"""

from __future__ import annotations

from epochal._internal.validation import (
    validate_day,
    validate_month,
    validate_month_index,
    validate_offset,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_month_index",
    "validate_offset",
]
