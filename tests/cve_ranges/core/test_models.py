from __future__ import annotations

from cve_ranges.core.domain.enums import EventKind, TimelineMode, VersionStatus
from cve_ranges.core.domain.models import RoundTripResult, VersionEvent, VersionRange


def test_event_constructors_and_normalize():
    e = VersionEvent.introduced("v1.2.3")
    assert e.kind is EventKind.INTRODUCED
    assert e.normalized() == VersionEvent.introduced("1.2.3")
    assert str(VersionEvent.fixed("1.0.1")) == "fixed=1.0.1"


def test_version_range_is_empty():
    assert VersionRange().is_empty
    assert not VersionRange(fixed="1.0.0").is_empty


def test_status_from_str_and_opposite():
    assert VersionStatus.from_str("Affected") is VersionStatus.AFFECTED
    assert VersionStatus.from_str(" unaffected ") is VersionStatus.UNAFFECTED
    assert VersionStatus.from_str("bogus") is None
    assert VersionStatus.from_str(None) is None
    assert VersionStatus.AFFECTED.opposite is VersionStatus.UNAFFECTED
    assert VersionStatus.UNKNOWN.opposite is VersionStatus.UNKNOWN


def test_timeline_mode_properties():
    assert TimelineMode.for_last_kind(EventKind.FIXED) is TimelineMode.CLOSED
    assert TimelineMode.for_last_kind(None) is TimelineMode.CLOSED
    assert TimelineMode.for_last_kind(EventKind.INTRODUCED) is TimelineMode.OPEN

    assert TimelineMode.CLOSED.default_status is VersionStatus.UNAFFECTED
    assert TimelineMode.CLOSED.range_status is VersionStatus.AFFECTED
    assert TimelineMode.CLOSED.opening_kind is EventKind.INTRODUCED

    assert TimelineMode.OPEN.default_status is VersionStatus.AFFECTED
    assert TimelineMode.OPEN.range_status is VersionStatus.UNAFFECTED
    assert TimelineMode.OPEN.opening_kind is EventKind.FIXED


def test_round_trip_result_ok():
    original = (VersionEvent.introduced("v1.0.0"),)
    rebuilt = (VersionEvent.introduced("1.0.0"),)
    assert RoundTripResult(module="m", original=original, reconstructed=rebuilt).ok
    assert not RoundTripResult(module="m", original=original, reconstructed=rebuilt, issues=("x",)).ok
    assert not RoundTripResult(module="m", original=original, reconstructed=()).matches
