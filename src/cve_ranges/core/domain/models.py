from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .enums import EventKind, VersionStatus
from ...shared.utils import strip_v_prefix

SEMVER = "semver"
GENESIS_VERSION = "0"


@dataclass(frozen=True)
class VersionEvent:
    kind: EventKind
    version: str

    @staticmethod
    def introduced(version: str) -> "VersionEvent":
        return VersionEvent(kind=EventKind.INTRODUCED, version=version)

    @staticmethod
    def fixed(version: str) -> "VersionEvent":
        return VersionEvent(kind=EventKind.FIXED, version=version)

    def normalized(self) -> "VersionEvent":
        return replace(self, version=strip_v_prefix(self.version))

    def __str__(self) -> str:
        return f"{self.kind.value}={self.version}"


@dataclass(frozen=True)
class VersionRange:
    """Half-open interval [introduced, fixed) labeled with a status.

    introduced == "0" means "from the first version"; an empty fixed means the
    interval has no upper bound. A status of None stands for the status
    opposite to whatever default the range is read against.
    """

    introduced: str = ""
    fixed: str = ""
    status: Optional[VersionStatus] = None
    version_type: str = SEMVER

    @property
    def is_empty(self) -> bool:
        return not self.introduced and not self.fixed


@dataclass(frozen=True)
class Bounds:
    lower: Optional[str] = None
    upper: Optional[str] = None


@dataclass(frozen=True)
class ModuleTimeline:
    module: str
    events: tuple[VersionEvent, ...] = field(default_factory=tuple)
    packages: tuple[str, ...] = field(default_factory=tuple)
    # False when at least one source range could not be expressed as events
    complete: bool = True


@dataclass(frozen=True)
class AffectedEntry:
    module: str
    ranges: tuple[VersionRange, ...] = field(default_factory=tuple)
    default_status: Optional[VersionStatus] = None
    packages: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RoundTripResult:
    module: str
    original: tuple[VersionEvent, ...]
    reconstructed: tuple[VersionEvent, ...]
    ranges: tuple[VersionRange, ...] = field(default_factory=tuple)
    default_status: VersionStatus = VersionStatus.AFFECTED
    issues: tuple[str, ...] = field(default_factory=tuple)

    @property
    def matches(self) -> bool:
        return tuple(e.normalized() for e in self.original) == self.reconstructed

    @property
    def ok(self) -> bool:
        return self.matches and not self.issues
