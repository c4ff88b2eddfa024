from enum import Enum


class FuzzyError(Exception):
    """Domain error for the scoring engine."""


class InvalidInput(FuzzyError):
    """Raw input is missing, non-numeric or not finite."""


class UndefinedDefuzzification(FuzzyError):
    """All aggregated strengths are zero, weighted average has no value."""


class Term(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


Float = float
