from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from .variable import GPA, ACTIVITY, LinguisticVariable
from ..core.rule import Rule
from ..core.types import Float, FuzzyError, Term

L, M, H = Term.LOW, Term.MEDIUM, Term.HIGH

# gpa x activity -> performance, one rule per combination
RULES: Tuple[Rule, ...] = (
    Rule(H, H, H),
    Rule(H, M, H),
    Rule(H, L, M),
    Rule(M, H, H),
    Rule(M, M, M),
    Rule(M, L, L),
    Rule(L, H, M),
    Rule(L, M, L),
    Rule(L, L, L),
)

# Representative crisp value per performance term (weighted-average anchors).
CENTROIDS: Mapping[Term, Float] = MappingProxyType({L: 20.0, M: 50.0, H: 80.0})


def parse_centroids(d: Mapping[Any, Any]) -> Mapping[Term, Float]:
    """
    Accepts {'low': 30, 'medium': 60, 'high': 90} (or Term keys).
    All three terms are required and values must be finite numbers.
    """
    out = {}
    for key, val in d.items():
        try:
            term = Term(key)
        except ValueError:
            raise FuzzyError(f"unknown centroid term: {key!r}") from None
        if isinstance(val, bool):
            raise FuzzyError(f"centroid for {term.value} is not a number: {val!r}")
        try:
            z = float(val)
        except (TypeError, ValueError):
            raise FuzzyError(f"centroid for {term.value} is not a number: {val!r}") from None
        if not math.isfinite(z):
            raise FuzzyError(f"centroid for {term.value} must be finite, got {z}")
        out[term] = z
    missing = [t.value for t in Term if t not in out]
    if missing:
        raise FuzzyError(f"missing centroids for: {', '.join(missing)}")
    return MappingProxyType(out)


@dataclass(frozen=True)
class KnowledgeBase:
    gpa: LinguisticVariable = GPA
    activity: LinguisticVariable = ACTIVITY
    rules: Tuple[Rule, ...] = RULES
    centroids: Mapping[Term, Float] = field(default_factory=lambda: CENTROIDS)

    def with_centroids(self, d: Mapping[Any, Any]) -> "KnowledgeBase":
        return replace(self, centroids=parse_centroids(d))


DEFAULT_KB = KnowledgeBase()
