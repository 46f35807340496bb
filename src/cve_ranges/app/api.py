from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import VersionStatus
from ..core.domain.models import AffectedEntry, ModuleTimeline, RoundTripResult, VersionEvent, VersionRange
from ..core.timeline import range_to_timeline, timeline_to_ranges


class CveRangesClient:
    """Client for converting vulnerability version timelines and advisory ranges.

    The container and its resources are initialized once and reused across calls.

    Example:
        # Using default configuration (from environment variables)
        client = CveRangesClient()
        ranges, default = client.to_ranges([VersionEvent.introduced("1.0.0")])
        client.close()

        # Using context manager (recommended)
        with CveRangesClient(collection_url="https://pkg.go.dev") as client:
            affected = client.convert("report.json")

        # Reconstruct against an assumed default when records omit defaultStatus
        with CveRangesClient(assumed_default_status="affected") as client:
            modules = client.reconstruct("CVE-2024-0001.json")
    """

    def __init__(
        self,
        *,
        assumed_default_status: VersionStatus | str | None = None,
        collection_url: str | None = None,
        lint: bool | None = None,
    ):
        """Initialize the client.

        Args:
            assumed_default_status: Default status used when an affected entry has none.
                                    If None, uses CVE_RANGES_ASSUMED_DEFAULT_STATUS or "unaffected".
            collection_url: collectionURL emitted by convert(). If None, uses CVE_RANGES_COLLECTION_URL.
            lint: Whether check() runs the timeline lint. If None, uses CVE_RANGES_LINT or True.
        """
        self._container = Container()

        # Build config dict with only provided values
        config_dict: dict[str, Any] = {}
        if assumed_default_status is not None:
            config_dict["assumed_default_status"] = assumed_default_status
        if collection_url is not None:
            config_dict["collection_url"] = collection_url
        if lint is not None:
            config_dict["lint"] = lint

        # Environment is read here rather than when the container class was defined
        config = AppConfig(**config_dict)
        self._container.config.from_pydantic(config)

        self._container.init_resources()

    def to_ranges(self, events: Sequence[VersionEvent] | None) -> tuple[list[VersionRange], VersionStatus]:
        """Convert a chronological event list to (ranges, default_status)."""
        return timeline_to_ranges(events)

    def to_timeline(
        self,
        vr: VersionRange | None,
        default_status: VersionStatus | None = None,
    ) -> tuple[list[VersionEvent], bool]:
        """Convert one range, read against default_status, back to events."""
        return range_to_timeline(vr, default_status)

    def convert(self, path: str | Path) -> list[dict[str, Any]]:
        """Return CVE JSON 5.0 affected objects for every module of a report file.

        Raises:
            ValueError: If the file is not valid JSON or does not match the report shape.
        """
        entries = self.convert_entries(path)
        return self._container.documents().dump_affected(entries)

    def convert_entries(self, path: str | Path) -> list[AffectedEntry]:
        uc = self._container.convert_uc()
        return uc.execute(Path(path))

    def reconstruct(self, path: str | Path) -> list[ModuleTimeline]:
        """Rebuild per-module timelines from a CVE record's affected entries.

        Modules whose ranges could not all be expressed as events have complete=False.
        """
        uc = self._container.reconstruct_uc()
        return uc.execute(Path(path))

    def check(self, path: str | Path) -> list[RoundTripResult]:
        """Round-trip every module timeline of a report through ranges and back."""
        uc = self._container.check_uc()
        return uc.execute(Path(path))

    def close(self) -> None:
        """Close the client and release resources."""
        self._container.shutdown_resources()

    def __enter__(self) -> CveRangesClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


__all__ = [
    "CveRangesClient",
    "AppConfig",
]
