from __future__ import annotations

from itertools import pairwise
from typing import Sequence, TYPE_CHECKING

from .utils import parse_semver

if TYPE_CHECKING:
    from ..core.domain.models import VersionEvent


def lint_timeline(events: Sequence[VersionEvent]) -> list[str]:
    """Report problems the converter itself does not check.

    The converter trusts the chronological order it is given. This lint flags:
    - versions that are not valid semver (a leading "v" is allowed)
    - two consecutive events of the same kind
    - versions that do not strictly ascend along the timeline
    """
    issues: list[str] = []
    parsed = [parse_semver(e.version) for e in events]
    for e, v in zip(events, parsed):
        if v is None:
            issues.append(f"{e.kind.value} version {e.version!r} is not valid semver")

    for (prev, prev_v), (cur, cur_v) in pairwise(zip(events, parsed)):
        if prev.kind == cur.kind:
            issues.append(f"consecutive {cur.kind.value} events at {prev.version} and {cur.version}")
        if prev_v is not None and cur_v is not None and cur_v <= prev_v:
            issues.append(f"version {cur.version} does not come after {prev.version}")
    return issues
