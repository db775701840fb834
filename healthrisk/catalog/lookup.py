"""
Read-only queries over the reference catalogs
"""

from typing import List

from healthrisk.catalog.conditions import CONDITIONS_BY_ID
from healthrisk.catalog.symptoms import SYMPTOMS, SYMPTOMS_BY_ID
from healthrisk.errors import CatalogLookupError
from healthrisk.models import Condition, Symptom
from healthrisk.nlp.language import localized


def get_symptom(symptom_id: str) -> Symptom:
    symptom = SYMPTOMS_BY_ID.get(symptom_id)
    if symptom is None:
        raise CatalogLookupError("symptom", symptom_id)
    return symptom


def get_condition(condition_id: str) -> Condition:
    condition = CONDITIONS_BY_ID.get(condition_id)
    if condition is None:
        raise CatalogLookupError("condition", condition_id)
    return condition


def search_symptoms(query: str, language: str = "en", limit: int = 10) -> List[Symptom]:
    """
    Search symptoms by name, description or voice keyword
    """
    query_lower = query.strip().lower()
    if not query_lower:
        return []

    results = []
    for symptom in SYMPTOMS:
        name = localized(symptom.name, language, default="").lower()
        description = localized(symptom.description, language, default="").lower()
        keywords = [k.lower() for k in localized(symptom.voice_keywords, language, default=[])]

        keyword_match = any(k in query_lower or query_lower in k for k in keywords)
        if query_lower in name or query_lower in description or keyword_match:
            results.append(symptom)

    return results[:limit]


def symptoms_by_category(category: str) -> List[Symptom]:
    return [symptom for symptom in SYMPTOMS if symptom.category == category]


def related_symptoms(symptom_id: str) -> List[Symptom]:
    """Related symptoms of a catalog entry, skipping ids that are not in the catalog"""
    symptom = get_symptom(symptom_id)
    return [SYMPTOMS_BY_ID[related] for related in symptom.related_symptoms if related in SYMPTOMS_BY_ID]
