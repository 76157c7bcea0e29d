"""Internal constants for Epochal.

These constants define the limits, defaults and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Unix epoch 0 is 1970-01-01 00:00:00 UTC
EPOCH_YEAR: int = 1970

# Any 400 consecutive Gregorian years hold exactly 97 leap years
YEARS_PER_CYCLE: int = 400
DAYS_PER_CYCLE: int = 146_097

# Accepted epoch range (signed 64-bit seconds)
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Days in each month (non-leap year), 0-indexed: January is 0
DAYS_IN_MONTH: tuple[int, ...] = (
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Short names are the first N characters of the English name
SHORT_NAME_LENGTH: int = 3

DEFAULT_DELIMITER: str = "/"

# Renders epoch 0 as "Thu, 01/01/1970 00:00:00 +00 UTC"
DEFAULT_FORMAT: str = "W, DD/MM/YY, HH:II:SS O UTC"


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "EPOCH_YEAR",
    "YEARS_PER_CYCLE",
    "DAYS_PER_CYCLE",
    "INT64_MIN",
    "INT64_MAX",
    "DAYS_IN_MONTH",
    "SHORT_NAME_LENGTH",
    "DEFAULT_DELIMITER",
    "DEFAULT_FORMAT",
]
