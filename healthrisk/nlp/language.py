"""
Language fallback resolution for localized catalog content
"""

from typing import Dict, List, Optional, TypeVar

from healthrisk.config import settings

T = TypeVar("T")


def language_priority(language: Optional[str]) -> List[str]:
    """Languages to try, in order: the requested one, then the default"""
    priority = []
    if language:
        priority.append(language.lower())
    if settings.DEFAULT_LANGUAGE not in priority:
        priority.append(settings.DEFAULT_LANGUAGE)
    return priority


def resolve_language(language: Optional[str], available) -> Optional[str]:
    """First language from the priority list that the content is available in"""
    for candidate in language_priority(language):
        if candidate in available:
            return candidate
    return None


def localized(content: Dict[str, T], language: Optional[str], default: Optional[T] = None) -> Optional[T]:
    """Pick the localized value of a per-language mapping"""
    resolved = resolve_language(language, content)
    if resolved is None:
        return default
    return content[resolved]
