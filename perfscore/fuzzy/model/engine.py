from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..core import norms
from ..core.defuzz import weighted_average, label_for
from ..core.rule import Rule
from ..core.types import Float, InvalidInput, Term
from .knowledge import KnowledgeBase, DEFAULT_KB
from .variable import MembershipVector

log = logging.getLogger(__name__)

# max over the firing strengths that target each performance term
AggregatedStrength = MembershipVector


@dataclass(frozen=True)
class FiredRule:
    rule: Rule
    gpa_mu: Float
    activity_mu: Float
    alpha: Float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "gpa": self.rule.gpa.value,
            "activity": self.rule.activity.value,
            "output": self.rule.output.value,
            "gpa_mu": self.gpa_mu,
            "activity_mu": self.activity_mu,
            "alpha": self.alpha,
        }


@dataclass(frozen=True)
class Result:
    crisp: Float       # unrounded weighted average, drives the label
    score: Float       # crisp rounded to 2 decimals
    label: str
    gpa: MembershipVector
    activity: MembershipVector
    strengths: AggregatedStrength

    def as_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "label": self.label}


def check_input(name: str, value: Any) -> Float:
    """Return value as float; raise InvalidInput for non-numbers, NaN and inf."""
    if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    x = float(value)
    if not math.isfinite(x):
        raise InvalidInput(f"{name} must be finite, got {x}")
    return x


class MamdaniEngine:
    """
    Two-input Mamdani inference with weighted-average defuzzification.

    fuzzify -> fire (min of the two antecedent degrees per rule)
            -> aggregate (max per performance term)
            -> defuzzify (weighted average over the centroid table) -> label.

    The engine holds only the immutable knowledge base; every call is independent.
    """
    def __init__(self, kb: Optional[KnowledgeBase] = None) -> None:
        self.kb = kb if kb is not None else DEFAULT_KB

    # ---------- stages ----------

    def fuzzify(self, gpa: Float, activity: Float) -> tuple[MembershipVector, MembershipVector]:
        mu_gpa = self.kb.gpa.fuzzify(gpa)
        mu_act = self.kb.activity.fuzzify(activity)
        log.debug("fuzzify gpa=%s -> %s, activity=%s -> %s",
                  gpa, mu_gpa.as_dict(), activity, mu_act.as_dict())
        return mu_gpa, mu_act

    def fire(self, mu_gpa: MembershipVector, mu_act: MembershipVector,
             rules: Optional[Iterable[Rule]] = None) -> List[FiredRule]:
        fired: List[FiredRule] = []
        for rule in (self.kb.rules if rules is None else rules):
            a, b = mu_gpa[rule.gpa], mu_act[rule.activity]
            fired.append(FiredRule(rule, a, b, norms.t_min((a, b))))
        return fired

    def aggregate(self, fired: Iterable[FiredRule]) -> AggregatedStrength:
        per_term: Dict[Term, List[Float]] = {t: [] for t in Term}
        for fr in fired:
            per_term[fr.rule.output].append(fr.alpha)
        # an empty term folds to 0.0
        strengths = AggregatedStrength.from_mapping({t: norms.s_max(v) for t, v in per_term.items()})
        log.debug("aggregated strengths %s", strengths.as_dict())
        return strengths

    def defuzzify(self, strengths: AggregatedStrength) -> Float:
        return weighted_average(dict(strengths.items()), self.kb.centroids)

    # ---------- API ----------

    def evaluate(self, gpa: Any, activity: Any) -> Result:
        g = check_input("gpa", gpa)
        a = check_input("activity", activity)
        if not self.kb.gpa.in_range(g) or not self.kb.activity.in_range(a):
            log.info("inputs outside nominal range: gpa=%s activity=%s", g, a)
        mu_gpa, mu_act = self.fuzzify(g, a)
        strengths = self.aggregate(self.fire(mu_gpa, mu_act))
        crisp = self.defuzzify(strengths)
        result = Result(crisp=crisp, score=round(crisp, 2), label=label_for(crisp),
                        gpa=mu_gpa, activity=mu_act, strengths=strengths)
        log.debug("evaluate(%s, %s) -> %.4f %s", g, a, crisp, result.label)
        return result

    def explain(self, gpa: Any, activity: Any, threshold: Float = 0.0) -> Dict[str, Any]:
        """
        Full trace for one student: memberships, rules with alpha > threshold,
        aggregated strengths and the final score/label.
        Defuzzification errors propagate unchanged.
        """
        g = check_input("gpa", gpa)
        a = check_input("activity", activity)
        mu_gpa, mu_act = self.fuzzify(g, a)
        fired = self.fire(mu_gpa, mu_act)
        strengths = self.aggregate(fired)
        crisp = self.defuzzify(strengths)
        return {
            "inputs": {"gpa": g, "activity": a},
            "memberships": {"gpa": mu_gpa.as_dict(), "activity": mu_act.as_dict()},
            "rules": [fr.as_dict() for fr in fired if fr.alpha > threshold],
            "strengths": strengths.as_dict(),
            "score": round(crisp, 2),
            "label": label_for(crisp),
        }


def evaluate(gpa: Any, activity: Any) -> Result:
    """Score one student against the default knowledge base."""
    return MamdaniEngine().evaluate(gpa, activity)
