"""Bounded, time-windowed cache for quote batches.

Avoids a second model call when the same request is repeated within a few
minutes. Entries expire a fixed time after insertion and the oldest
inserted entry is evicted when the cache is full.
"""

import logging
import time
from collections.abc import Callable, Iterable

from ..quotes.models import QuoteRecord
from .models import CacheEntry

logger = logging.getLogger(__name__)

MAX_CACHE_SIZE = 300
CACHE_TTL_SECONDS = 300.0


def make_fingerprint(
    language: str,
    tone: str,
    count: int,
    custom_prompt: str = "",
    category: str = "",
) -> str:
    """Build the cache key for a generation request.

    Free-form prompt and category text contribute only their combined
    length, so near-identical prompts of equal length share a key.

    Args:
        language: Requested language code
        tone: Tone label
        count: Number of quotes requested
        custom_prompt: Optional extra user prompt
        category: Optional category label

    Returns:
        Deterministic fingerprint string
    """
    extra_length = len(custom_prompt + category)
    extra = str(extra_length) if extra_length else ""
    return f"{language}-{tone}-{count}-{extra}"


class QuoteCache:
    """FIFO-bounded cache of quote batches with a freshness window.

    Owned by the caller and passed to the generator, so each test or
    session can use its own instance.

    Example:
        cache = QuoteCache()
        key = make_fingerprint("en", "epic", 5)
        if (entry := cache.get(key)) is None:
            records = ...  # generate
            cache.put(key, records)
    """

    def __init__(
        self,
        max_size: int = MAX_CACHE_SIZE,
        ttl: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty cache.

        Args:
            max_size: Maximum number of distinct fingerprints kept
            ttl: Seconds after insertion during which an entry is served
            clock: Time source in seconds

        Raises:
            ValueError: If max_size or ttl is not positive
        """
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl}")

        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        # dict preserves insertion order; overwrites keep their position
        self._entries: dict[str, CacheEntry] = {}

    def get(self, fingerprint: str) -> CacheEntry | None:
        """Return the entry for a fingerprint if it is still fresh.

        Args:
            fingerprint: Key from make_fingerprint()

        Returns:
            CacheEntry, or None when absent or older than the ttl
        """
        entry = self._entries.get(fingerprint)
        if entry is None:
            return None

        age = self._clock() - entry.created_at
        if age >= self.ttl:
            logger.debug(f"Cache entry '{fingerprint}' expired ({age:.1f}s old)")
            return None

        return entry

    def put(self, fingerprint: str, records: Iterable[QuoteRecord]) -> CacheEntry:
        """Store records under a fingerprint, evicting the oldest key if full.

        Args:
            fingerprint: Key from make_fingerprint()
            records: Parsed quotes to cache

        Returns:
            The stored CacheEntry
        """
        if fingerprint not in self._entries and len(self._entries) >= self.max_size:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug(f"Cache full, evicted '{oldest}'")

        entry = CacheEntry(records=tuple(records), created_at=self._clock())
        self._entries[fingerprint] = entry
        return entry

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._entries
