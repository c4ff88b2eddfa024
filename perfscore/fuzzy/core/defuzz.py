import logging
from typing import Mapping
from .types import Float, Term, UndefinedDefuzzification

log = logging.getLogger(__name__)

LABEL_LOW = "Low"
LABEL_MEDIUM = "Medium"
LABEL_HIGH = "High"

# lower bounds of the Medium and High labels
MEDIUM_FROM: Float = 60.0
HIGH_FROM: Float = 80.0


def weighted_average(strengths: Mapping[Term, Float], centroids: Mapping[Term, Float]) -> Float:
    """
    score = sum(w_c * z_c) / sum(w_c) over c in Term.
    Raises UndefinedDefuzzification when every w_c is 0.
    """
    num = 0.0
    den = 0.0
    for term in Term:
        w = float(strengths[term])
        num += w * float(centroids[term])
        den += w
    if den <= 0.0:
        log.warning("all aggregated strengths are zero: %s",
                    {t.value: float(strengths[t]) for t in Term})
        raise UndefinedDefuzzification(
            "aggregated strengths sum to zero; no rule fired for these inputs")
    return num / den


def label_for(value: Float) -> str:
    if value < MEDIUM_FROM:
        return LABEL_LOW
    if value < HIGH_FROM:
        return LABEL_MEDIUM
    return LABEL_HIGH
