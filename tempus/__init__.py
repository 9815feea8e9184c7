"""Tempus: calendar-aware instants and durations.

Tempus provides an absolute instant type with millisecond resolution and
a flat duration type, with arithmetic that follows calendar rules (month
lengths, leap years) rather than plain elapsed-seconds math.

Core Types:
    Instant: Point in time, milliseconds since 1970-01-01T00:00:00Z
    Duration: Days, hours, minutes, seconds and milliseconds

Units:
    Timezone: Fixed UTC offset or the host's default zone

Format Functions:
    format_pattern: Render calendar fields with a pattern
    parse_pattern: Parse text into calendar fields with a pattern

Exceptions:
    TempusError: Base exception
    ValidationError: Invalid input values
    RangeError: Calendar field out of range
    ParseError: Text does not match a pattern
    TimezoneError: Invalid timezone

Example:
    >>> from tempus import Duration, Instant
    >>> now = Instant.now()
    >>> later = now + Duration(hours=1)
    >>> next_month = now.add_months(1)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from tempus.core.duration import Duration
from tempus.core.instant import Instant

# Units
from tempus.units.timezone import Timezone

# Exceptions
from tempus.errors import (
    ParseError,
    RangeError,
    TempusError,
    TimezoneError,
    ValidationError,
)

# Format functions
from tempus.format import format_pattern, parse_pattern

# Calendar helpers
from tempus._internal.calendar import days_in_month, is_leap_year

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "Instant",
    # Units
    "Timezone",
    # Exceptions
    "TempusError",
    "ValidationError",
    "RangeError",
    "ParseError",
    "TimezoneError",
    # Format functions
    "format_pattern",
    "parse_pattern",
    # Calendar helpers
    "days_in_month",
    "is_leap_year",
]
