"""Version timeline conversion core."""

from .constraint import ConstraintSyntaxError, is_constraint, parse_constraint
from .timeline import range_to_timeline, ranges_to_timeline, timeline_to_ranges

__all__ = [
    "ConstraintSyntaxError",
    "is_constraint",
    "parse_constraint",
    "range_to_timeline",
    "ranges_to_timeline",
    "timeline_to_ranges",
]
