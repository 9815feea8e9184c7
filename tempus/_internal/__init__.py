"""Internal utilities for Tempus.

This module contains private implementation details:
    - Calendar field validation
    - Proleptic Gregorian calendar math
    - Constants and defaults

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.validation import (
    check_fields,
    validate_day,
    validate_month,
    validate_time,
)

__all__: list[str] = [
    "check_fields",
    "validate_day",
    "validate_month",
    "validate_time",
]
