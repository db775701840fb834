"""
Condition matching engine
Weighted-rule scoring of catalog conditions against selected symptoms
"""

import logging
from typing import Dict, List, Optional

from healthrisk.catalog.conditions import CONDITIONS
from healthrisk.config import settings
from healthrisk.models import Condition, ConditionMatch, Prevalence, SelectedSymptom

logger = logging.getLogger(__name__)

PREVALENCE_MULTIPLIERS: Dict[Prevalence, float] = {
    Prevalence.HIGH: 1.2,
    Prevalence.MEDIUM: 1.0,
    Prevalence.LOW: 0.8,
}

COMMON_WEIGHT = 0.7
RARE_BONUS = 0.3
SEVERITY_WEIGHT = 0.1
MIN_CONFIDENCE = 0.1


class ConditionMatcher:
    """
    Scores every catalog condition against the user's selected symptoms
    """

    def __init__(self, conditions: Optional[List[Condition]] = None, max_matches: Optional[int] = None):
        self.conditions = conditions if conditions is not None else CONDITIONS
        self.max_matches = max_matches or settings.MAX_CONDITION_MATCHES

    def find_matching_conditions(self, selected_symptoms: List[SelectedSymptom]) -> List[ConditionMatch]:
        """
        Rank conditions for a set of selected symptoms

        Args:
            selected_symptoms: Symptoms chosen by the user, with severities

        Returns:
            List[ConditionMatch]: Best matches first, at most max_matches
        """
        matches = []

        for condition in self.conditions:
            match = self.calculate_condition_match(condition, selected_symptoms)
            if match.confidence > MIN_CONFIDENCE:
                matches.append(match)

        matches.sort(key=lambda m: m.confidence, reverse=True)

        logger.info(f"Condition matching: {len(matches)} candidates for {len(selected_symptoms)} symptoms")
        return matches[:self.max_matches]

    def calculate_condition_match(self, condition: Condition,
                                  selected_symptoms: List[SelectedSymptom]) -> ConditionMatch:
        symptom_ids = {s.symptom_id for s in selected_symptoms}

        matching_common = [s for s in condition.common_symptoms if s in symptom_ids]
        matching_rare = [s for s in condition.rare_symptoms if s in symptom_ids]

        if condition.common_symptoms:
            common_score = len(matching_common) / len(condition.common_symptoms)
        else:
            common_score = 0.0
        rare_score = len(matching_rare) * RARE_BONUS
        severity_score = self.calculate_severity_match(condition, selected_symptoms)

        base_confidence = common_score * COMMON_WEIGHT + rare_score + severity_score * SEVERITY_WEIGHT
        confidence = base_confidence * PREVALENCE_MULTIPLIERS[condition.prevalence_in_migrants]
        confidence = max(0.0, min(1.0, confidence))

        missing = [s for s in condition.common_symptoms if s not in symptom_ids]

        return ConditionMatch(
            condition_id=condition.id,
            confidence=confidence,
            matching_symptoms=list(dict.fromkeys(matching_common + matching_rare)),
            missing_symptoms=missing,
            reasoning=self.generate_reasoning(condition, matching_common, confidence),
        )

    @staticmethod
    def calculate_severity_match(condition: Condition, selected_symptoms: List[SelectedSymptom]) -> float:
        """
        Similarity between reported severity and condition severity (1.0 = same level)
        """
        if not selected_symptoms:
            return 0.0

        avg_severity = sum(s.severity.level for s in selected_symptoms) / len(selected_symptoms)
        return 1.0 - abs(avg_severity - condition.severity.level) / 4

    @staticmethod
    def generate_reasoning(condition: Condition, matching_common: List[str], confidence: float) -> str:
        if confidence > 0.8:
            return (f"High probability match. {len(matching_common)} out of "
                    f"{len(condition.common_symptoms)} common symptoms present.")
        elif confidence > 0.5:
            return "Possible match. Consider additional symptoms and risk factors."
        elif confidence > 0.3:
            return "Low probability match. Some symptoms align but further evaluation needed."
        return "Unlikely match based on current symptoms."


# Default instance over the bundled catalog
condition_matcher = ConditionMatcher()
