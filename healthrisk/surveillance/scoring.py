"""
Risk scoring for anonymous reports
Both values are computed once, when the report is submitted
"""

import math
from typing import Dict, List, Optional

from healthrisk.models import DurationBucket, Severity

SEVERITY_SCORES: Dict[Severity, int] = {
    Severity.MILD: 1,
    Severity.MODERATE: 3,
    Severity.SEVERE: 6,
    Severity.CRITICAL: 10,
}

SEVERITY_WEIGHTS: Dict[Severity, float] = {
    Severity.MILD: 0.25,
    Severity.MODERATE: 0.5,
    Severity.SEVERE: 0.75,
    Severity.CRITICAL: 1.0,
}

DURATION_MULTIPLIERS: Dict[DurationBucket, float] = {
    DurationBucket.LESS_THAN_DAY: 0.5,
    DurationBucket.ONE_TO_THREE_DAYS: 1.0,
    DurationBucket.FOUR_TO_SEVEN_DAYS: 1.5,
    DurationBucket.ONE_TO_TWO_WEEKS: 2.0,
    DurationBucket.MORE_THAN_TWO_WEEKS: 3.0,
}

HIGH_RISK_SYMPTOMS = frozenset({"fever", "breathing", "chest_pain"})
HIGH_RISK_SYMPTOM_BONUS = 2
MAX_RISK_SCORE = 30


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative values (Python's round() is banker's rounding)"""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def duration_multiplier(duration: Optional[str]) -> float:
    bucket = DurationBucket.parse(duration)
    if bucket is None:
        return 1.0
    return DURATION_MULTIPLIERS[bucket]


def calculate_risk_score(severity: Severity, symptoms: List[str], duration: Optional[str]) -> int:
    """
    Risk score in [0, 30] from severity, high-risk symptoms and duration
    """
    score = SEVERITY_SCORES[severity]
    score += sum(1 for s in symptoms if s in HIGH_RISK_SYMPTOMS) * HIGH_RISK_SYMPTOM_BONUS
    score *= duration_multiplier(duration)

    return int(max(0, min(round_half_up(score), MAX_RISK_SCORE)))


def calculate_hotspot_contribution(severity: Severity, symptoms: List[str]) -> float:
    """
    Weight this report adds to its district's hotspot score
    """
    contribution = SEVERITY_WEIGHTS[severity] + len(symptoms) * 0.1
    return round_half_up(contribution, 2)
