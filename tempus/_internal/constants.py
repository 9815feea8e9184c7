"""Internal constants for Tempus.

These constants define the limits, defaults and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MILLIS_PER_MINUTE: int = SECONDS_PER_MINUTE * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = SECONDS_PER_HOUR * MILLIS_PER_SECOND
MILLIS_PER_DAY: int = SECONDS_PER_DAY * MILLIS_PER_SECOND  # 86_400_000

# Field ranges, inclusive
MIN_MONTH: int = 1
MAX_MONTH: int = 12
MAX_HOUR: int = 23
MAX_MINUTE: int = 59
MAX_SECOND: int = 59
MAX_MILLISECOND: int = 999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
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

# Output pattern used when none is given
DEFAULT_PATTERN: str = "yyyy-MM-dd HH:mm:ss"

# Compiled patterns kept in memory before the oldest is dropped
PATTERN_CACHE_SIZE: int = 128

# Decimal digit counts recognised by Instant.from_timestamp
UNIX_SECONDS_DIGITS: int = 10
UNIX_MILLIS_DIGITS: int = 13

# Fixed offsets are limited to +/- 14 hours (Pacific/Kiritimati is UTC+14)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MIN_MONTH",
    "MAX_MONTH",
    "MAX_HOUR",
    "MAX_MINUTE",
    "MAX_SECOND",
    "MAX_MILLISECOND",
    "DAYS_IN_MONTH",
    "DEFAULT_PATTERN",
    "PATTERN_CACHE_SIZE",
    "UNIX_SECONDS_DIGITS",
    "UNIX_MILLIS_DIGITS",
    "MAX_UTC_OFFSET_SECONDS",
]
