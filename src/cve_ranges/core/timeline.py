"""Conversion between version timelines and labeled ranges.

A timeline is a chronological list of Introduced/Fixed events. The advisory
schema instead wants non-overlapping ranges plus one default status for
everything not listed. The two functions here translate in each direction;
both are pure.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .constraint import ConstraintSyntaxError, is_constraint, parse_constraint
from .domain.enums import EventKind, TimelineMode, VersionStatus
from .domain.models import GENESIS_VERSION, Bounds, VersionEvent, VersionRange
from ..shared.utils import strip_v_prefix

logger = logging.getLogger(__name__)


def timeline_to_ranges(events: Sequence[VersionEvent] | None) -> tuple[list[VersionRange], VersionStatus]:
    """Return (ranges, default_status) describing the same versions as `events`.

    A timeline ending in a fix is laid out in CLOSED mode (affected ranges,
    default unaffected). One ending in an unmatched introduction uses OPEN
    mode (unaffected gaps, default affected). If the first event does not
    open a pair in the chosen mode, a leading range from the genesis
    version "0" up to that event is synthesized.

    Events are paired in the order given; versions are not compared.

    Example:
        [introduced=1.0.0, fixed=1.0.3, introduced=1.1.0]
        -> [0..1.0.0 unaffected, 1.0.3..1.1.0 unaffected], default affected
    """
    if not events:
        return [], VersionStatus.AFFECTED

    remaining = [e.normalized() for e in events]
    mode = TimelineMode.for_last_kind(remaining[-1].kind)
    logger.debug(f"Converting {len(remaining)} events in {mode.name} mode")

    ranges: list[VersionRange] = []
    if remaining[0].kind is not mode.opening_kind:
        first = remaining.pop(0)
        ranges.append(VersionRange(introduced=GENESIS_VERSION, fixed=first.version, status=mode.range_status))

    # A trailing unpaired event is covered by the default status.
    for start, end in zip(remaining[::2], remaining[1::2]):
        ranges.append(VersionRange(introduced=start.version, fixed=end.version, status=mode.range_status))

    logger.debug(f"Produced {len(ranges)} ranges, default status {mode.default_status.value}")
    return ranges, mode.default_status


def range_to_timeline(
    vr: VersionRange | None,
    default_status: VersionStatus | None = None,
) -> tuple[list[VersionEvent], bool]:
    """Return the events a single range stands for, read against `default_status`.

    `default_status` falls back to UNAFFECTED. The second element is False
    only when the range cannot be expressed as events at all: its status is
    UNKNOWN or equal to the default, so it marks no transition.

    The "introduced" field may hold a constraint expression (">= A, < B" or
    "< B"), which then takes precedence over "fixed". A malformed expression
    yields whatever bounds could be parsed.
    """
    if vr is None or vr.is_empty:
        return [], True

    default = default_status or VersionStatus.UNAFFECTED
    status = vr.status or default.opposite
    if status is VersionStatus.UNKNOWN or status is default:
        logger.warning(f"Range {vr.introduced!r}..{vr.fixed!r} with status {status.value} is not representable against default {default.value}")
        return [], False

    bounds = _range_bounds(vr)
    # An affected range opens with an introduction; an unaffected gap with a fix.
    if status is VersionStatus.AFFECTED:
        start_kind, end_kind = EventKind.INTRODUCED, EventKind.FIXED
    else:
        start_kind, end_kind = EventKind.FIXED, EventKind.INTRODUCED

    events: list[VersionEvent] = []
    if bounds.lower:
        events.append(VersionEvent(kind=start_kind, version=bounds.lower))
    if bounds.upper:
        events.append(VersionEvent(kind=end_kind, version=bounds.upper))
    return events, True


def ranges_to_timeline(
    ranges: Iterable[VersionRange],
    default_status: VersionStatus | None = None,
) -> tuple[list[VersionEvent], bool]:
    """Concatenate range_to_timeline over ranges that share one default status."""
    events: list[VersionEvent] = []
    ok = True
    for vr in ranges:
        part, part_ok = range_to_timeline(vr, default_status)
        events.extend(part)
        ok = ok and part_ok
    return events, ok


def _range_bounds(vr: VersionRange) -> Bounds:
    introduced = strip_v_prefix(vr.introduced.strip())
    fixed = strip_v_prefix(vr.fixed.strip())

    if is_constraint(introduced):
        try:
            bounds = parse_constraint(introduced)
        except ConstraintSyntaxError as e:
            logger.warning(f"{e}; using partial bounds lower={e.partial.lower!r} upper={e.partial.upper!r}")
            bounds = e.partial
            if bounds.upper is None and fixed:
                bounds = Bounds(lower=bounds.lower, upper=fixed)
    else:
        bounds = Bounds(lower=introduced or None, upper=fixed or None)

    if bounds.lower == GENESIS_VERSION:
        bounds = Bounds(lower=None, upper=bounds.upper)
    return bounds
