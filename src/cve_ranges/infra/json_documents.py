from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import TypeAdapter

from ..core.domain.enums import EventKind, VersionStatus
from ..core.domain.models import AffectedEntry, ModuleTimeline, VersionEvent, VersionRange, SEMVER
from ..core.ports.advisory_port import AdvisorySourcePort
from ..core.ports.report_port import ReportSourcePort
from .schemas import Cve5Affected, Cve5Record, Cve5VersionRange, ReportDocument, ReportModule, ReportPackage, ReportVersion

logger = logging.getLogger(__name__)

_AFFECTED_LIST = TypeAdapter(list[Cve5Affected])


def _module_to_domain(m: ReportModule) -> ModuleTimeline:
    events = tuple(
        VersionEvent.introduced(v.introduced) if v.introduced is not None else VersionEvent.fixed(v.fixed or "")
        for v in m.versions
    )
    return ModuleTimeline(module=m.module, events=events, packages=tuple(p.package for p in m.packages))


def _range_to_domain(v: Cve5VersionRange) -> VersionRange:
    status = VersionStatus.from_str(v.status)
    if status is None:
        logger.warning(f"Unrecognized version status {v.status!r}; treating as unknown")
        status = VersionStatus.UNKNOWN
    return VersionRange(
        introduced=v.version,
        fixed=v.less_than or "",
        status=status,
        version_type=v.version_type or SEMVER,
    )


def _affected_to_domain(a: Cve5Affected) -> AffectedEntry:
    module = a.vendor or a.product or a.package_name or ""
    packages = (a.package_name,) if a.package_name else ()
    return AffectedEntry(
        module=module,
        ranges=tuple(_range_to_domain(v) for v in a.versions or ()),
        default_status=VersionStatus.from_str(a.default_status),
        packages=packages,
    )


class JsonDocumentAdapter(ReportSourcePort, AdvisorySourcePort):
    """Read report / CVE JSON documents from disk and write CVE5 / report JSON.

    Advisory input may be a full CVE JSON 5.0 record, an object with an
    "affected" list, or the bare list.
    """

    def __init__(self, collection_url: str | None = None) -> None:
        self._collection_url = collection_url

    def load_modules(self, path: Path) -> Sequence[ModuleTimeline]:
        doc = ReportDocument.model_validate(self._read_json(path))
        logger.debug(f"Loaded report {doc.id or path} with {len(doc.modules)} modules")
        return [_module_to_domain(m) for m in doc.modules]

    def load_affected(self, path: Path) -> Sequence[AffectedEntry]:
        data = self._read_json(path)
        if isinstance(data, list):
            affected = _AFFECTED_LIST.validate_python(data)
        elif isinstance(data, dict) and "containers" in data:
            affected = Cve5Record.model_validate(data).containers.cna.affected
        elif isinstance(data, dict):
            affected = _AFFECTED_LIST.validate_python(data.get("affected", []))
        else:
            raise ValueError(f"{path}: expected a JSON object or list, got {type(data).__name__}")
        logger.debug(f"Loaded {len(affected)} affected entries from {path}")
        return [_affected_to_domain(a) for a in affected]

    def dump_affected(self, entries: Sequence[AffectedEntry]) -> list[dict[str, Any]]:
        """Render entries as CVE JSON 5.0 affected objects, one per package."""
        out: list[dict[str, Any]] = []
        for entry in entries:
            versions = [
                Cve5VersionRange(
                    version=r.introduced,
                    less_than=r.fixed or None,
                    status=(r.status or VersionStatus.AFFECTED).value,
                    version_type=r.version_type,
                )
                for r in entry.ranges
            ]
            for package in entry.packages or (entry.module,):
                affected = Cve5Affected(
                    vendor=entry.module,
                    product=package,
                    collection_url=self._collection_url,
                    package_name=package,
                    versions=versions or None,
                    default_status=entry.default_status.value if entry.default_status else None,
                )
                out.append(affected.model_dump(by_alias=True, exclude_none=True))
        return out

    def dump_modules(self, modules: Sequence[ModuleTimeline]) -> dict[str, Any]:
        """Render timelines in the report document shape."""
        doc = ReportDocument(
            modules=[
                ReportModule(
                    module=m.module,
                    versions=[
                        ReportVersion(introduced=e.version) if e.kind is EventKind.INTRODUCED else ReportVersion(fixed=e.version)
                        for e in m.events
                    ],
                    packages=[ReportPackage(package=p) for p in m.packages],
                )
                for m in modules
            ]
        )
        return doc.model_dump(exclude_none=True)

    def _read_json(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
