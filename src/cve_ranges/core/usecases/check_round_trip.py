from __future__ import annotations

import logging
from pathlib import Path

from ..domain.models import RoundTripResult
from ..ports.report_port import ReportSourcePort
from ..timeline import ranges_to_timeline, timeline_to_ranges
from ...shared.timeline_lint import lint_timeline

logger = logging.getLogger(__name__)


class RoundTripCheckUseCase:
    """Convert every module timeline to ranges and back, and compare.

    With lint enabled, problems found by lint_timeline are attached to each
    result and make it fail even when the round trip matches.
    """

    def __init__(self, source: ReportSourcePort, lint: bool = True) -> None:
        self._source = source
        self._lint = lint

    def execute(self, path: Path) -> list[RoundTripResult]:
        modules = self._source.load_modules(path)
        logger.info(f"Checking round trip for {len(modules)} modules from {path} (lint={self._lint})")
        results: list[RoundTripResult] = []
        for m in modules:
            ranges, default_status = timeline_to_ranges(m.events)
            rebuilt, ok = ranges_to_timeline(ranges, default_status)
            issues = lint_timeline(m.events) if self._lint else []
            if not ok:
                issues.append("ranges are not representable as a timeline")
            result = RoundTripResult(
                module=m.module,
                original=m.events,
                reconstructed=tuple(rebuilt),
                ranges=tuple(ranges),
                default_status=default_status,
                issues=tuple(issues),
            )
            if not result.matches:
                logger.warning(f"{m.module}: round trip mismatch")
            results.append(result)
        logger.info(f"{sum(r.ok for r in results)}/{len(results)} modules passed")
        return results
