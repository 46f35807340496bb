from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from ..domain.models import AffectedEntry


class AdvisorySourcePort(Protocol):
    def load_affected(self, path: Path) -> Sequence[AffectedEntry]:
        """Return the affected entries (ranges + default status) of an advisory record."""
        ...
