"""Locale data models for quote prompts and field extraction."""

import re
from dataclasses import dataclass, field
from enum import Enum


class Language(str, Enum):
    """Supported output languages.

    Declaration order is the fallback order used by the batch parser when a
    block does not match the active language's field labels.
    """

    JA = "ja"
    EN = "en"
    ZH = "zh"
    KO = "ko"
    FR = "fr"
    ES = "es"
    DE = "de"


DEFAULT_LANGUAGE = Language.JA


def field_pattern(label: str, ignore_case: bool = False) -> re.Pattern[str]:
    """Compile a single-line ``Label : value`` extractor.

    Args:
        label: Regex fragment matching the field label
        ignore_case: Whether the label should match case-insensitively

    Returns:
        Compiled pattern whose first group is the field value
    """
    flags = re.MULTILINE
    if ignore_case:
        flags |= re.IGNORECASE
    return re.compile(rf"{label}\s*:[ \t]*(.*?)(?:\n|$)", flags)


@dataclass(frozen=True)
class PatternSet:
    """Four field extractors for one language.

    Attributes:
        quote: Extracts the quote body
        speaker: Extracts the character name
        source: Extracts the title of the fictional work
        date: Extracts the era or year
    """

    quote: re.Pattern[str]
    speaker: re.Pattern[str]
    source: re.Pattern[str]
    date: re.Pattern[str]

    @classmethod
    def from_labels(
        cls,
        quote: str,
        speaker: str,
        source: str,
        date: str,
        ignore_case: bool = False,
    ) -> "PatternSet":
        """Build a pattern set from the four localized field labels."""
        return cls(
            quote=field_pattern(quote, ignore_case),
            speaker=field_pattern(speaker, ignore_case),
            source=field_pattern(source, ignore_case),
            date=field_pattern(date, ignore_case),
        )


@dataclass(frozen=True)
class Locale:
    """Prompts, field patterns and error messages for one language.

    Attributes:
        code: Language this locale serves
        system: System-role prompt describing the output format
        batch_template: User prompt template with ``{tone}``, ``{count}``
            and ``{category}`` slots
        patterns: Field extractors for model output in this language
        category_template: Clause inserted for a non-empty category
        default_category: Value used for ``{category}`` when none is given
        placeholders: User-facing messages keyed by error kind
            (``network``, ``auth``, ``rate_limit``, ``unknown``)
    """

    code: Language
    system: str
    batch_template: str
    patterns: PatternSet
    category_template: str = ""
    default_category: str = ""
    placeholders: dict[str, str] = field(default_factory=dict)

    def create_batch_prompt(self, tone: str, count: int, category: str = "") -> str:
        """Fill the batch prompt for the given tone, count and category."""
        if category:
            clause = self.category_template.format(category=category)
        else:
            clause = self.default_category
        return self.batch_template.format(tone=tone, count=count, category=clause)

    def placeholder(self, kind: str) -> str:
        """Return the message shown when generation fails with ``kind``."""
        return self.placeholders.get(kind) or self.placeholders.get("unknown", "")
