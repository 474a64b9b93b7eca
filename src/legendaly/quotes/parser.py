"""Batch parser turning raw model output into quote records.

The model is asked to answer with ``---``-separated blocks of four labeled
lines. Models sometimes answer with another language's labels, so a block
that does not match the requested language is retried against every known
pattern set in a fixed order.
"""

import logging
import re
from collections.abc import Mapping

from ..locales import PatternSet, all_patterns
from .models import UNKNOWN, ParseResult, QuoteRecord, today_iso

logger = logging.getLogger(__name__)

BLOCK_DELIMITER = re.compile(r"\s*---\s*")


def split_blocks(raw_text: str) -> list[str]:
    """Split raw model output into non-blank quote blocks."""
    return [block for block in BLOCK_DELIMITER.split(raw_text) if block.strip()]


def _first_group(pattern: re.Pattern[str], block: str) -> str | None:
    match = pattern.search(block)
    return match.group(1).strip() if match else None


def _match_count(pattern_set: PatternSet, block: str) -> int:
    """Count matching fields; zero when the quote field itself is missing."""
    if not pattern_set.quote.search(block):
        return 0
    others = (pattern_set.speaker, pattern_set.source, pattern_set.date)
    return 1 + sum(1 for pattern in others if pattern.search(block))


def _select_patterns(
    block: str, language: str, patterns: Mapping[str, PatternSet]
) -> PatternSet | None:
    """Pick the pattern set that best matches the block.

    The active language is tried first, then every pattern set in table
    order. A set needs a quote match to qualify; among qualifying sets the
    one matching the most fields wins and earlier sets win ties.
    """
    ordered = list(patterns.items())
    if language in patterns:
        ordered.insert(0, (language, patterns[language]))

    best_code, best, best_count = None, None, 0
    for code, candidate in ordered:
        count = _match_count(candidate, block)
        if count > best_count:
            best_code, best, best_count = code, candidate, count
        if best_count == 4:
            break

    if best is not None and best_code != language:
        logger.debug(f"Block matched '{best_code}' labels instead of '{language}'")
    return best


def parse_block(
    block: str, language: str, patterns: Mapping[str, PatternSet] | None = None
) -> QuoteRecord | None:
    """Parse one block into a QuoteRecord.

    Args:
        block: One delimiter-separated segment of the model output
        language: Requested language code
        patterns: Pattern table in fallback order (defaults to all locales)

    Returns:
        Parsed record, or None if no pattern set finds a non-empty quote
    """
    table = all_patterns() if patterns is None else patterns
    pattern_set = _select_patterns(block, language, table)
    if pattern_set is None:
        return None

    text = _first_group(pattern_set.quote, block)
    if not text:
        return None

    return QuoteRecord(
        text=text,
        speaker=_first_group(pattern_set.speaker, block) or UNKNOWN,
        source=_first_group(pattern_set.source, block) or UNKNOWN,
        date=_first_group(pattern_set.date, block) or today_iso(),
    )


def parse_batch(
    raw_text: str, language: str, patterns: Mapping[str, PatternSet] | None = None
) -> ParseResult:
    """Parse a full model response into quote records.

    Blocks that match no pattern set are dropped without raising; the
    number of dropped blocks is reported on the result.

    Args:
        raw_text: Model output containing ``---``-separated blocks
        language: Requested language code
        patterns: Pattern table in fallback order (defaults to all locales)

    Returns:
        ParseResult with records in block order and the dropped count
    """
    table = all_patterns() if patterns is None else patterns
    records: list[QuoteRecord] = []
    dropped = 0

    for block in split_blocks(raw_text):
        record = parse_block(block, language, table)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    return ParseResult(records=tuple(records), dropped=dropped)
