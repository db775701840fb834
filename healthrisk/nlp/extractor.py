"""
Symptom extraction from voice transcripts
Keyword matching over the symptom catalog, in the speaker's language
"""

import re
import logging
from typing import Dict, List, Optional

from healthrisk.catalog.symptoms import SYMPTOMS
from healthrisk.models import ExtractedSymptom, Severity, Symptom
from healthrisk.nlp.language import localized

logger = logging.getLogger(__name__)

# Characters of transcript kept on each side of a keyword hit
CONTEXT_WINDOW = 20

# Voice extraction is less reliable than an explicit selection
VOICE_CONFIDENCE_FACTOR = 0.8

# Intensity words per language, checked from most to least severe
SEVERITY_KEYWORDS: Dict[str, Dict[Severity, List[str]]] = {
    "en": {
        Severity.CRITICAL: ["extreme", "unbearable", "worst", "emergency", "can't breathe", "chest pain"],
        Severity.SEVERE: ["very", "really", "terrible", "awful", "intense", "sharp"],
        Severity.MODERATE: ["bad", "uncomfortable", "noticeable", "bothering"],
        Severity.MILD: ["little", "slight", "minor", "light"],
    },
    "hi": {
        Severity.CRITICAL: ["बहुत ज्यादा", "असह्य", "तेज़", "गंभीर"],
        Severity.SEVERE: ["बहुत", "तेज़", "भयंकर"],
        Severity.MODERATE: ["बुरा", "परेशान"],
        Severity.MILD: ["हल्का", "थोड़ा"],
    },
    "ml": {
        Severity.CRITICAL: ["സഹിക്കാൻ പറ്റാത്ത", "ഗുരുതര"],
        Severity.SEVERE: ["വളരെ", "കഠിന"],
        Severity.MODERATE: ["ബുദ്ധിമുട്ട്"],
        Severity.MILD: ["ചെറിയ", "കുറച്ച്"],
    },
}

KERALA_DISTRICTS = [
    "thiruvananthapuram", "kollam", "pathanamthitta", "alappuzha", "kottayam",
    "idukki", "ernakulam", "thrissur", "palakkad", "malappuram", "kozhikode",
    "wayanad", "kannur", "kasaragod",
]


def normalize_text(text: str) -> str:
    """
    Lower-case a transcript and collapse whitespace
    """
    if not text:
        return ""

    text = text.lower()
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def estimate_severity(context: str, language: str) -> Severity:
    """
    Estimate severity from intensity words around a symptom mention
    """
    keywords = localized(SEVERITY_KEYWORDS, language, default=SEVERITY_KEYWORDS["en"])
    context_lower = context.lower()

    for severity in (Severity.CRITICAL, Severity.SEVERE, Severity.MODERATE):
        if any(word in context_lower for word in keywords[severity]):
            return severity

    return Severity.MILD


def _find_in_text(symptom: Symptom, normalized: str, language: str,
                  confidence: float) -> List[ExtractedSymptom]:
    hits = []
    keywords = localized(symptom.voice_keywords, language, default=[])

    for keyword in keywords:
        keyword_lower = keyword.lower()
        index = normalized.find(keyword_lower)
        if index < 0:
            continue

        start = max(0, index - CONTEXT_WINDOW)
        end = min(len(normalized), index + len(keyword_lower) + CONTEXT_WINDOW)
        context = normalized[start:end]

        hits.append(ExtractedSymptom(
            symptom=symptom.id,
            confidence=confidence * VOICE_CONFIDENCE_FACTOR,
            context=context,
            severity=estimate_severity(context, language),
            body_part=symptom.body_part,
        ))

    return hits


def remove_duplicate_symptoms(symptoms: List[ExtractedSymptom]) -> List[ExtractedSymptom]:
    """
    Keep the most confident candidate per symptom id
    """
    unique: Dict[str, ExtractedSymptom] = {}

    for candidate in symptoms:
        existing = unique.get(candidate.symptom)
        if existing is None or existing.confidence < candidate.confidence:
            unique[candidate.symptom] = candidate

    return list(unique.values())


def extract_symptoms(text: str, language: str = "en", confidence: float = 1.0,
                     catalog: Optional[List[Symptom]] = None) -> List[ExtractedSymptom]:
    """
    Extract symptom candidates from a transcript

    Args:
        text: Transcript or typed description
        language: Language tag of the transcript
        confidence: Transcription confidence, used as the ceiling for every candidate

    Returns:
        List[ExtractedSymptom]: One candidate per symptom, most confident first
    """
    try:
        normalized = normalize_text(text)
        if not normalized:
            return []

        ceiling = min(max(confidence, 0.0), 1.0)
        candidates = []
        for symptom in catalog if catalog is not None else SYMPTOMS:
            candidates.extend(_find_in_text(symptom, normalized, language, ceiling))

        extracted = remove_duplicate_symptoms(candidates)
        extracted.sort(key=lambda s: s.confidence, reverse=True)

        logger.info(f"Symptom extraction ({language}): {len(extracted)} symptoms found")
        return extracted

    except Exception as e:
        logger.error(f"Error in symptom extraction: {e}")
        return []


def extract_district(text: str) -> Optional[str]:
    """
    First Kerala district mentioned in a transcript
    """
    normalized = normalize_text(text)

    for district in KERALA_DISTRICTS:
        if district in normalized:
            return district

    return None
