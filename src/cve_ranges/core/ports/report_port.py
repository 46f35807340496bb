from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from ..domain.models import ModuleTimeline


class ReportSourcePort(Protocol):
    def load_modules(self, path: Path) -> Sequence[ModuleTimeline]:
        """Return the affected modules of a report, each with its version timeline."""
        ...
