from __future__ import annotations

import logging
from pathlib import Path

from ..domain.enums import VersionStatus
from ..domain.models import ModuleTimeline
from ..ports.advisory_port import AdvisorySourcePort
from ..timeline import ranges_to_timeline

logger = logging.getLogger(__name__)


class ReconstructTimelineUseCase:
    def __init__(
        self,
        source: AdvisorySourcePort,
        assumed_default: VersionStatus | str = VersionStatus.UNAFFECTED,
    ) -> None:
        self._source = source
        self._assumed_default = VersionStatus(assumed_default)

    def execute(self, path: Path) -> list[ModuleTimeline]:
        entries = self._source.load_affected(path)
        logger.info(f"Reconstructing timelines for {len(entries)} affected entries from {path}")
        result: list[ModuleTimeline] = []
        for entry in entries:
            default = entry.default_status or self._assumed_default
            events, ok = ranges_to_timeline(entry.ranges, default)
            if not ok:
                logger.warning(f"{entry.module}: some ranges are not representable against default {default.value}")
            result.append(
                ModuleTimeline(
                    module=entry.module,
                    events=tuple(events),
                    packages=entry.packages,
                    complete=ok,
                )
            )
        return result
