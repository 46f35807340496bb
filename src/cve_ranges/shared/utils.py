from __future__ import annotations

from typing import Optional

from semver import Version


def strip_v_prefix(version: str) -> str:
    """Drop a single cosmetic leading "v" ("v1.2.3" -> "1.2.3")."""
    if version.startswith("v"):
        return version[1:]
    return version


def parse_semver(version: str) -> Optional[Version]:
    """Parse a semantic version, allowing a leading "v"; None if it is not semver.

    Parsed versions compare by semver precedence:
        >>> parse_semver("1.0.0-rc.1") < parse_semver("v1.0.0")
        True
    """
    try:
        return Version.parse(strip_v_prefix(version))
    except ValueError:
        return None


def is_valid_semver(version: str) -> bool:
    return parse_semver(version) is not None
