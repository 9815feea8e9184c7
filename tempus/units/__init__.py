"""Unit types for Tempus.

This module provides supporting types:
    - Timezone: fixed UTC offset or the host's default zone
"""

from __future__ import annotations

from tempus.units.timezone import LocalTimezone, Timezone

__all__: list[str] = [
    "LocalTimezone",
    "Timezone",
]
