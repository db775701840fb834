"""
Symptom-check session orchestration
Merges voice and explicit input, then matches conditions and classifies urgency
"""

import logging
from typing import Dict, List, Optional

from healthrisk.catalog.conditions import CONDITIONS_BY_ID
from healthrisk.catalog.symptoms import SYMPTOMS_BY_ID
from healthrisk.models import (
    ConditionMatch,
    ExtractedSymptom,
    SelectedSymptom,
    TriageResult,
)
from healthrisk.nlp.extractor import extract_symptoms
from healthrisk.nlp.language import localized
from healthrisk.triage.matcher import ConditionMatcher, condition_matcher
from healthrisk.triage.urgency import classify_urgency

logger = logging.getLogger(__name__)

FOLLOW_UP_TEMPLATES: Dict[str, str] = {
    "en": "Do you also have {name}?",
    "hi": "क्या आपको {name} भी है?",
    "ml": "നിങ്ങൾക്ക് {name} ഉണ്ടോ?",
}

# Matches whose recommendations and missing symptoms are surfaced
TOP_MATCHES = 3


def merge_symptoms(extracted: List[ExtractedSymptom],
                   selected: List[SelectedSymptom]) -> List[SelectedSymptom]:
    """
    Combine voice-extracted and explicitly selected symptoms
    An explicit selection replaces a voice candidate for the same symptom
    """
    merged: Dict[str, SelectedSymptom] = {}

    for candidate in extracted:
        merged[candidate.symptom] = SelectedSymptom(
            symptom_id=candidate.symptom,
            severity=candidate.severity,
            notes=candidate.context,
        )

    for symptom in selected:
        merged[symptom.symptom_id] = symptom

    return list(merged.values())


def collect_recommendations(matches: List[ConditionMatch], language: str) -> List[str]:
    recommendations = []

    for match in matches[:TOP_MATCHES]:
        condition = CONDITIONS_BY_ID.get(match.condition_id)
        if condition is None:
            continue
        recommendations.extend(localized(condition.recommendations, language, default=[]))

    return list(dict.fromkeys(recommendations))[:8]  # Top 8


def generate_follow_up_questions(matches: List[ConditionMatch], language: str) -> List[str]:
    """
    Questions about common symptoms the top matches expect but the user has not reported
    """
    template = localized(FOLLOW_UP_TEMPLATES, language, default=FOLLOW_UP_TEMPLATES["en"])
    questions = []

    for match in matches[:TOP_MATCHES]:
        for symptom_id in match.missing_symptoms:
            symptom = SYMPTOMS_BY_ID.get(symptom_id)
            if symptom is None:
                continue
            name = localized(symptom.name, language, default=symptom_id)
            questions.append(template.format(name=name))

    return list(dict.fromkeys(questions))[:6]  # Top 6


def run_symptom_check(selected: Optional[List[SelectedSymptom]] = None,
                      transcript: Optional[str] = None,
                      language: str = "en",
                      transcript_confidence: float = 1.0,
                      matcher: Optional[ConditionMatcher] = None) -> TriageResult:
    """
    Run one symptom-check session

    Args:
        selected: Symptoms chosen on screen
        transcript: Voice transcript, if the user described symptoms by voice
        language: Session language
        transcript_confidence: Confidence reported by the transcription service
        matcher: Condition matcher to use, defaults to the bundled catalog

    Returns:
        TriageResult: Merged symptoms, ranked conditions and urgency
    """
    extracted = extract_symptoms(transcript, language, transcript_confidence) if transcript else []
    symptoms = merge_symptoms(extracted, selected or [])

    matcher = matcher or condition_matcher
    matches = matcher.find_matching_conditions(symptoms) if symptoms else []
    urgency = classify_urgency(matches, {condition.id: condition for condition in matcher.conditions})

    result = TriageResult(
        language=language,
        symptoms=symptoms,
        extracted_symptoms=extracted,
        matches=matches,
        urgency=urgency,
        recommendations=collect_recommendations(matches, language),
        follow_up_questions=generate_follow_up_questions(matches, language),
    )

    logger.info(f"Symptom check: {len(symptoms)} symptoms, {len(matches)} matches, urgency {urgency.value}")
    return result
