"""Timezone representation for interpreting calendar fields.

An Instant is a point on the UTC timeline; its calendar fields depend on
the zone it is viewed in. Tempus knows exactly two kinds of zone:

    - Fixed UTC offsets (UTC itself being the zero offset)
    - The host's default zone, resolved through the host clock so that
      daylight saving transitions are honored

There is no IANA database support.
"""

from __future__ import annotations

import logging
import time
from typing import ClassVar

from tempus._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    MILLIS_PER_DAY,
    MILLIS_PER_SECOND,
)
from tempus.errors import TimezoneError

logger = logging.getLogger(__name__)


class Timezone:
    """A timezone represented as a fixed UTC offset.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time). Timezone.local() returns the host's default zone,
    whose offset may change over time.

    Attributes:
        offset_seconds: The UTC offset in seconds.
        name: Optional human-readable name for the timezone.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_hours(5, 30).offset_seconds
        19800
    """

    __slots__ = ("_offset_seconds", "_name")

    _utc_instance: ClassVar[Timezone | None] = None
    _local_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Timezone with the specified UTC offset.

        Args:
            offset_seconds: UTC offset in seconds. Positive values are
                east of UTC, negative values are west.
            name: Optional name for the timezone (e.g., "UTC").

        Raises:
            TimezoneError: If offset_seconds is outside +/- 14 hours.
        """
        if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds
        self._name: str | None = name

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone (a shared instance)."""
        if cls._utc_instance is None:
            cls._utc_instance = Timezone(0, "UTC")
        return cls._utc_instance

    @classmethod
    def local(cls) -> Timezone:
        """Return the host's default timezone (a shared instance).

        Offsets are looked up through the host clock for every instant,
        so the zone follows daylight saving rules.
        """
        if cls._local_instance is None:
            cls._local_instance = LocalTimezone()
        return cls._local_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from hours and minutes offset.

        Args:
            hours: Hour component of offset (-14 to +14). Sign determines
                direction (positive = east of UTC).
            minutes: Minute component of offset (0 to 59). The sign is
                taken from hours.

        Raises:
            TimezoneError: If hours or minutes are out of valid range.

        Examples:
            >>> Timezone.from_hours(-5).offset_seconds
            -18000
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        if hours < -14 or hours > 14:
            raise TimezoneError(f"hours must be -14 to 14, got {hours}")

        sign = -1 if hours < 0 else 1
        return cls(hours * 3600 + sign * minutes * 60)

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds (positive is east of UTC)."""
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_utc(self) -> bool:
        return self._offset_seconds == 0

    @property
    def is_local(self) -> bool:
        """Return True for the host's default zone."""
        return False

    def offset_at(self, utc_millis: int) -> int:
        """Return the UTC offset in seconds in effect at an instant.

        Args:
            utc_millis: Milliseconds since the Unix epoch.
        """
        return self._offset_seconds

    def to_wall_millis(self, utc_millis: int) -> int:
        """Convert an instant to wall-clock milliseconds in this zone."""
        return utc_millis + self.offset_at(utc_millis) * MILLIS_PER_SECOND

    def to_utc_millis(self, wall_millis: int) -> int:
        """Convert wall-clock milliseconds in this zone to an instant."""
        return wall_millis - self._offset_seconds * MILLIS_PER_SECOND

    def __eq__(self, other: object) -> bool:
        """Fixed zones are equal when their offsets are equal."""
        if not isinstance(other, Timezone):
            return NotImplemented
        if self.is_local or other.is_local:
            return self.is_local and other.is_local
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return a string like "UTC", "+05:30", or "-05:00"."""
        if self._offset_seconds == 0:
            return self._name if self._name else "UTC"

        total_minutes = abs(self._offset_seconds) // 60
        hours = total_minutes // 60
        minutes = total_minutes % 60
        sign = "+" if self._offset_seconds >= 0 else "-"

        return f"{sign}{hours:02d}:{minutes:02d}"


class LocalTimezone(Timezone):
    """The host's default timezone.

    Offsets come from time.localtime, which applies the host's zone
    rules. Instants the host clock cannot represent fall back to the
    host's standard offset. Both are read from the host on every call,
    so a change of ``TZ`` followed by time.tzset() is picked up.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(-time.timezone, time.tzname[0])

    @property
    def offset_seconds(self) -> int:
        """Return the offset currently in effect."""
        return time.localtime().tm_gmtoff

    @property
    def standard_offset_seconds(self) -> int:
        """Return the host's standard (non-DST) offset."""
        return -time.timezone

    @property
    def name(self) -> str | None:
        return time.tzname[0]

    @property
    def is_utc(self) -> bool:
        return False

    @property
    def is_local(self) -> bool:
        return True

    def offset_at(self, utc_millis: int) -> int:
        seconds = utc_millis // MILLIS_PER_SECOND
        try:
            return time.localtime(seconds).tm_gmtoff
        except (OverflowError, OSError, ValueError):
            standard = self.standard_offset_seconds
            logger.debug(
                "host clock cannot resolve %d; using standard offset %d",
                seconds,
                standard,
            )
            return standard

    def to_utc_millis(self, wall_millis: int) -> int:
        # The offsets a day either side bracket any single transition.
        # Ambiguous wall times take the earlier instant; wall times in a
        # gap use the pre-transition offset and land after the gap.
        before = self.offset_at(wall_millis - MILLIS_PER_DAY)
        after = self.offset_at(wall_millis + MILLIS_PER_DAY)
        candidates = [
            wall_millis - offset * MILLIS_PER_SECOND
            for offset in dict.fromkeys((before, after))
            if self.offset_at(wall_millis - offset * MILLIS_PER_SECOND) == offset
        ]
        if candidates:
            return min(candidates)
        return wall_millis - before * MILLIS_PER_SECOND

    def __hash__(self) -> int:
        return hash("local")

    def __repr__(self) -> str:
        return "Timezone.local()"

    def __str__(self) -> str:
        return self.name or "local"


__all__ = ["Timezone", "LocalTimezone"]
