"""Parser for compact version constraint expressions.

Some producers put both bounds of a range into its single "version" field:

    ">= 1.0.0, < 1.0.1"     introduced 1.0.0, fixed 1.0.1
    "< 1.0.1"               fixed 1.0.1, introduced at the first version

Grammar: [">=" VERSION ("," | " ")] "<" VERSION

Clauses are separated by a comma or by whitespace before the next operator,
so ">=1.0.0 <1.0.1" reads the same as ">= 1.0.0, < 1.0.1".
"""

from __future__ import annotations

import re

from .domain.models import Bounds
from ..shared.utils import strip_v_prefix


_OPERATORS = ("<", ">", "=")
# Comma, or whitespace followed by an operator
_CLAUSE_SEP_RE = re.compile(r"\s*,\s*|\s+(?=[<>=])")
_CLAUSE_RE = re.compile(r"^(?P<op>>=|<)\s*(?P<version>[^\s,<>=]+)$")


class ConstraintSyntaxError(ValueError):
    """Raised for a malformed constraint expression.

    `partial` holds whatever bounds were parsed before the offending clause.
    """

    def __init__(self, expression: str, reason: str, partial: Bounds) -> None:
        super().__init__(f"Invalid constraint {expression!r}: {reason}")
        self.expression = expression
        self.reason = reason
        self.partial = partial


def is_constraint(value: str) -> bool:
    return value.lstrip().startswith(_OPERATORS)


def parse_constraint(expression: str) -> Bounds:
    lower: str | None = None
    upper: str | None = None
    for clause in _CLAUSE_SEP_RE.split(expression.strip()):
        m = _CLAUSE_RE.match(clause)
        if not m:
            raise ConstraintSyntaxError(expression, f"unrecognized clause {clause!r}", Bounds(lower, upper))
        version = strip_v_prefix(m.group("version"))
        if m.group("op") == ">=":
            if lower is not None or upper is not None:
                raise ConstraintSyntaxError(expression, "'>=' must be the first and only lower bound", Bounds(lower, upper))
            lower = version
        else:
            if upper is not None:
                raise ConstraintSyntaxError(expression, "more than one '<' bound", Bounds(lower, upper))
            upper = version
    if upper is None:
        raise ConstraintSyntaxError(expression, "missing '<' upper bound", Bounds(lower, upper))
    return Bounds(lower=lower, upper=upper)
