# Linguistic variables and their membership vectors

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Tuple
from ..core.mfs import MembershipFunction, Triangular, LeftShoulder, RightShoulder
from ..core.types import Float, Term

@dataclass(frozen=True)
class MembershipVector:
    """Degree per term. Also used for aggregated output strengths."""
    low: Float = 0.0
    medium: Float = 0.0
    high: Float = 0.0

    def __getitem__(self, term: Term) -> Float:
        return getattr(self, Term(term).value)

    def items(self) -> Iterator[Tuple[Term, Float]]:
        for term in Term:
            yield term, self[term]

    def as_dict(self) -> Dict[str, Float]:
        return {t.value: mu for t, mu in self.items()}

    @classmethod
    def from_mapping(cls, m: Mapping[Term, Float]) -> "MembershipVector":
        return cls(**{t.value: float(m.get(t, 0.0)) for t in Term})

@dataclass(frozen=True)
class LinguisticVariable:
    name: str
    vmin: Float
    vmax: Float
    terms: Mapping[Term, MembershipFunction] = field(default_factory=dict)

    def fuzzify(self, x: Float) -> MembershipVector:
        # x is not clamped to [vmin, vmax]; the shoulders saturate on their own
        return MembershipVector(**{t.value: self.terms[t].mu(x) for t in Term})

    def in_range(self, x: Float) -> bool:
        return self.vmin <= x <= self.vmax


GPA = LinguisticVariable("gpa", 0.0, 4.0, {
    Term.LOW: LeftShoulder(2.0, 2.75),
    Term.MEDIUM: Triangular(2.0, 2.75, 3.5),
    Term.HIGH: RightShoulder(3.0, 3.5),
})

ACTIVITY = LinguisticVariable("activity", 0.0, 100.0, {
    Term.LOW: LeftShoulder(40.0, 60.0),
    Term.MEDIUM: Triangular(40.0, 60.0, 80.0),
    Term.HIGH: RightShoulder(60.0, 80.0),
})
