from __future__ import annotations

import logging
from pathlib import Path

from ..domain.models import AffectedEntry
from ..ports.report_port import ReportSourcePort
from ..timeline import timeline_to_ranges

logger = logging.getLogger(__name__)


class ConvertReportUseCase:
    def __init__(self, source: ReportSourcePort) -> None:
        self._source = source

    def execute(self, path: Path) -> list[AffectedEntry]:
        modules = self._source.load_modules(path)
        logger.info(f"Converting {len(modules)} modules from {path}")
        entries: list[AffectedEntry] = []
        for m in modules:
            ranges, default_status = timeline_to_ranges(m.events)
            logger.debug(f"{m.module}: {len(ranges)} ranges, default {default_status.value}")
            entries.append(
                AffectedEntry(
                    module=m.module,
                    ranges=tuple(ranges),
                    default_status=default_status,
                    packages=m.packages,
                )
            )
        return entries
