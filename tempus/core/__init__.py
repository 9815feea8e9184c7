"""Core temporal types.

This module provides the two value types:
    - Instant: Absolute point in time with millisecond resolution
    - Duration: Flat day/hour/minute/second/millisecond tuple
"""

from __future__ import annotations

from tempus.core.duration import Duration
from tempus.core.instant import Instant

__all__: list[str] = [
    "Duration",
    "Instant",
]
