"""Locale table for quote generation.

Maps each supported language to its prompts and field patterns. Lookups
never fail: unknown language codes resolve to the default locale.
"""

from .base import DEFAULT_LANGUAGE, Language, Locale, PatternSet
from . import de, en, es, fr, ja, ko, zh

__all__ = [
    "DEFAULT_LANGUAGE",
    "Language",
    "Locale",
    "PatternSet",
    "SUPPORTED_LANGUAGES",
    "all_patterns",
    "get_locale",
    "resolve_language",
]

_LOCALES: dict[Language, Locale] = {
    Language.JA: ja.LOCALE,
    Language.EN: en.LOCALE,
    Language.ZH: zh.LOCALE,
    Language.KO: ko.LOCALE,
    Language.FR: fr.LOCALE,
    Language.ES: es.LOCALE,
    Language.DE: de.LOCALE,
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(language.value for language in Language)


def resolve_language(code: str | Language | None) -> Language:
    """Map a language code to a supported language, defaulting when unknown.

    Args:
        code: Language code such as "en" (case-insensitive), or None

    Returns:
        Matching Language, or DEFAULT_LANGUAGE if the code is not supported
    """
    if isinstance(code, Language):
        return code
    try:
        return Language((code or "").strip().lower())
    except ValueError:
        return DEFAULT_LANGUAGE


def get_locale(code: str | Language | None) -> Locale:
    """Get the locale for a language code.

    Args:
        code: Language code; unknown or empty codes fall back to the default

    Returns:
        Locale for the resolved language
    """
    return _LOCALES[resolve_language(code)]


def all_patterns() -> dict[str, PatternSet]:
    """Return every locale's pattern set keyed by code, in fallback order."""
    return {language.value: _LOCALES[language].patterns for language in Language}
