from __future__ import annotations

from typing import Sequence

from ..core.domain.enums import EventKind
from ..core.domain.models import VersionEvent


_KIND_ALIASES = {
    "introduced": EventKind.INTRODUCED,
    "i": EventKind.INTRODUCED,
    "fixed": EventKind.FIXED,
    "f": EventKind.FIXED,
}


def parse_event_token(token: str) -> VersionEvent:
    """Parse a command-line event token such as "introduced=1.0.0" or "f=1.0.1".

    Raises:
        ValueError: If the token has no "=", an unknown kind, or an empty version.
    """
    kind_s, sep, version = token.partition("=")
    if not sep:
        raise ValueError(f"Invalid event {token!r}: expected KIND=VERSION")
    kind = _KIND_ALIASES.get(kind_s.strip().lower())
    if kind is None:
        raise ValueError(f"Invalid event {token!r}: kind must be 'introduced' or 'fixed'")
    version = version.strip()
    if not version:
        raise ValueError(f"Invalid event {token!r}: missing version")
    return VersionEvent(kind=kind, version=version)


def format_events(events: Sequence[VersionEvent]) -> str:
    return " ".join(str(e) for e in events) if events else "(none)"
