"""tests/cve_ranges/conftest.py

Common fixtures for the entire test suite.
"""

import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CVE_RANGES_* settings from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("CVE_RANGES_"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_json(tmp_path: Path):
    """Factory fixture writing a JSON payload to a file under tmp_path."""

    def _write(name: str, payload) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def report_payload() -> dict:
    return {
        "id": "GO-9999-0001",
        "modules": [
            {
                "module": "github.com/gin-gonic/gin",
                "versions": [{"fixed": "1.6.0"}],
                "packages": [{"package": "github.com/gin-gonic/gin"}],
            },
            {
                "module": "example.com/open",
                "versions": [{"introduced": "1.0.0"}, {"fixed": "1.0.3"}, {"introduced": "1.1.0"}],
            },
        ],
    }


@pytest.fixture
def cve_record_payload() -> dict:
    return {
        "dataType": "CVE_RECORD",
        "dataVersion": "5.0",
        "cveMetadata": {"cveId": "CVE-9999-0001"},
        "containers": {
            "cna": {
                "affected": [
                    {
                        "vendor": "Go standard library",
                        "product": "crypto/rand",
                        "collectionURL": "https://pkg.go.dev",
                        "packageName": "crypto/rand",
                        "versions": [
                            {"version": "0", "lessThan": "1.17.11", "status": "affected", "versionType": "semver"},
                            {"version": "1.18.0", "lessThan": "1.18.3", "status": "affected", "versionType": "semver"},
                        ],
                        "platforms": ["windows"],
                        "defaultStatus": "unaffected",
                    }
                ]
            }
        },
    }
