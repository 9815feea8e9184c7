"""Calendar-aware arithmetic for instants.

Functions:
    add_days: Move by calendar days, keeping the wall time.
    add_months: Move by months, clamping the day of month.
    add_years: Move by years, clamping February 29.
    add_clock: Add elapsed hours, minutes, seconds, milliseconds.
    add_fractional: Add a fractional unit truncated to whole seconds.
    apply_fields: Apply a set of field deltas in calendar order.
    apply_duration: Apply a Duration.
    remove_duration: Undo apply_duration.
"""

from __future__ import annotations

from tempus.arithmetic.rollover import (
    add_clock,
    add_days,
    add_fractional,
    add_months,
    add_years,
    apply_duration,
    apply_fields,
    remove_duration,
)

__all__: list[str] = [
    "add_clock",
    "add_days",
    "add_fractional",
    "add_months",
    "add_years",
    "apply_duration",
    "apply_fields",
    "remove_duration",
]
