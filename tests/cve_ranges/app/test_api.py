from __future__ import annotations

import pytest

from cve_ranges import CveRangesClient, timeline_to_ranges
from cve_ranges.core.domain.enums import VersionStatus
from cve_ranges.core.domain.models import VersionEvent, VersionRange


@pytest.fixture
def client():
    with CveRangesClient() as c:
        yield c


def test_to_ranges_and_back(client):
    events = [VersionEvent.introduced("1.0.0"), VersionEvent.fixed("1.0.3"), VersionEvent.introduced("1.1.0")]
    ranges, default = client.to_ranges(events)
    assert (ranges, default) == timeline_to_ranges(events)
    assert default is VersionStatus.AFFECTED
    rebuilt = []
    for r in ranges:
        part, ok = client.to_timeline(r, default)
        assert ok
        rebuilt.extend(part)
    assert rebuilt == events


def test_convert(client, write_json, report_payload):
    affected = client.convert(write_json("report.json", report_payload))
    assert [a["vendor"] for a in affected] == ["github.com/gin-gonic/gin", "example.com/open"]
    assert affected[0]["versions"] == [{"version": "0", "lessThan": "1.6.0", "status": "affected", "versionType": "semver"}]
    assert affected[0]["defaultStatus"] == "unaffected"
    assert affected[1]["defaultStatus"] == "affected"
    assert "collectionURL" not in affected[0]


def test_convert_with_collection_url(write_json, report_payload):
    with CveRangesClient(collection_url="https://pkg.go.dev") as c:
        affected = c.convert(write_json("report.json", report_payload))
    assert all(a["collectionURL"] == "https://pkg.go.dev" for a in affected)


def test_collection_url_from_environment(monkeypatch, write_json, report_payload):
    monkeypatch.setenv("CVE_RANGES_COLLECTION_URL", "https://example.org")
    with CveRangesClient() as c:
        affected = c.convert(write_json("report.json", report_payload))
    assert affected[0]["collectionURL"] == "https://example.org"


def test_reconstruct(client, write_json, cve_record_payload):
    [module] = client.reconstruct(write_json("cve.json", cve_record_payload))
    assert module.module == "Go standard library"
    assert module.complete
    assert module.events == (
        VersionEvent.fixed("1.17.11"),
        VersionEvent.introduced("1.18.0"),
        VersionEvent.fixed("1.18.3"),
    )


def test_reconstruct_assumed_default(write_json):
    affected = [{"vendor": "m", "versions": [{"version": "1.0.0", "lessThan": "1.0.1", "status": "affected"}]}]
    path = write_json("a.json", affected)
    with CveRangesClient(assumed_default_status="affected") as c:
        [module] = c.reconstruct(path)
    assert not module.complete


def test_check(client, write_json, report_payload):
    results = client.check(write_json("report.json", report_payload))
    assert [r.ok for r in results] == [True, True]


def test_check_lint_disabled(write_json):
    payload = {"modules": [{"module": "m", "versions": [{"introduced": "2.0"}, {"fixed": "1.0"}]}]}
    path = write_json("r.json", payload)
    with CveRangesClient() as c:
        assert not c.check(path)[0].ok
    with CveRangesClient(lint=False) as c:
        assert c.check(path)[0].ok


def test_to_timeline_default_status(client):
    r = VersionRange(introduced="< 1.0.1", status=VersionStatus.AFFECTED)
    assert client.to_timeline(r) == ([VersionEvent.fixed("1.0.1")], True)
