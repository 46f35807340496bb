from __future__ import annotations

from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    INTRODUCED = "introduced"
    FIXED = "fixed"


class VersionStatus(str, Enum):
    AFFECTED = "affected"
    UNAFFECTED = "unaffected"
    UNKNOWN = "unknown"

    @classmethod
    def from_str(cls, value: str | None) -> Optional["VersionStatus"]:
        """Parse a status label case-insensitively; unrecognized labels give None."""
        if value is None:
            return None
        s = value.strip().lower()
        if not s:
            return None
        for status in cls:
            if status.value == s:
                return status
        return None

    @property
    def opposite(self) -> "VersionStatus":
        if self is VersionStatus.AFFECTED:
            return VersionStatus.UNAFFECTED
        if self is VersionStatus.UNAFFECTED:
            return VersionStatus.AFFECTED
        return VersionStatus.UNKNOWN


class TimelineMode(Enum):
    """How a timeline is laid out as explicit ranges plus a default status.

    - CLOSED: the timeline ends with a fix. Ranges list affected intervals,
      everything else is unaffected.
    - OPEN: the timeline ends with an unmatched introduction. Ranges list the
      unaffected gaps, everything else is affected.
    """

    CLOSED = "closed"
    OPEN = "open"

    @classmethod
    def for_last_kind(cls, kind: EventKind | None) -> "TimelineMode":
        if kind is EventKind.INTRODUCED:
            return cls.OPEN
        return cls.CLOSED

    @property
    def default_status(self) -> VersionStatus:
        if self is TimelineMode.OPEN:
            return VersionStatus.AFFECTED
        return VersionStatus.UNAFFECTED

    @property
    def range_status(self) -> VersionStatus:
        return self.default_status.opposite

    @property
    def opening_kind(self) -> EventKind:
        """Kind of the first event of every (start, end) pair in this mode."""
        if self is TimelineMode.OPEN:
            return EventKind.FIXED
        return EventKind.INTRODUCED
