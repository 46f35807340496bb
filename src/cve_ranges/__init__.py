"""cve_ranges package: app/core/infra/shared.

Expose the converter functions and the library-friendly client at the package level.
"""

from .app.api import AppConfig, CveRangesClient
from .core.timeline import range_to_timeline, ranges_to_timeline, timeline_to_ranges

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "CveRangesClient",
    "AppConfig",
    "timeline_to_ranges",
    "range_to_timeline",
    "ranges_to_timeline",
]
