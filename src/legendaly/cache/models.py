"""Data models for the quote cache."""

from dataclasses import dataclass

from ..quotes.models import QuoteRecord


@dataclass(frozen=True)
class CacheEntry:
    """Cached result of one generation request.

    Attributes:
        records: Parsed quotes in display order
        created_at: Clock reading when the entry was inserted
    """

    records: tuple[QuoteRecord, ...]
    created_at: float
