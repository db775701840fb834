"""
Urgency classification for a symptom-check session
"""

from typing import Dict, List, Optional

from healthrisk.catalog.conditions import CONDITIONS_BY_ID
from healthrisk.models import Condition, ConditionMatch, UrgencyLevel


def classify_urgency(matches: List[ConditionMatch],
                     conditions_by_id: Optional[Dict[str, Condition]] = None) -> UrgencyLevel:
    """
    Highest urgency among the matched conditions, LOW when nothing matched
    """
    catalog = conditions_by_id if conditions_by_id is not None else CONDITIONS_BY_ID
    urgency = UrgencyLevel.LOW

    for match in matches:
        condition = catalog.get(match.condition_id)
        if condition is not None and condition.urgency.rank > urgency.rank:
            urgency = condition.urgency

    return urgency
