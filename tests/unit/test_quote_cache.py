"""Unit tests for QuoteCache and fingerprinting."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from legendaly.cache import QuoteCache, make_fingerprint
from legendaly.cache.manager import CACHE_TTL_SECONDS, MAX_CACHE_SIZE
from legendaly.quotes.models import QuoteRecord


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


RECORDS = (QuoteRecord(text="Cached words", speaker="Echo", source="Loop", date="2001"),)


class TestFingerprint:
    """Test cache key construction."""

    def test_fingerprint_format(self) -> None:
        """Test the key combines language, tone, count and extra length."""
        assert make_fingerprint("en", "epic", 5) == "en-epic-5-"
        assert make_fingerprint("ja", "zen", 3, "abc", "de") == "ja-zen-3-5"

    def test_equal_length_prompts_share_a_key(self) -> None:
        """Test free-form text only contributes its length."""
        assert make_fingerprint("en", "epic", 5, "cats") == make_fingerprint(
            "en", "epic", 5, "dogs"
        )

    def test_different_counts_differ(self) -> None:
        """Test count is part of the key."""
        assert make_fingerprint("en", "epic", 5) != make_fingerprint("en", "epic", 6)


class TestQuoteCacheValidation:
    """Test constructor validation."""

    def test_defaults(self) -> None:
        """Test default capacity and freshness window."""
        cache = QuoteCache()

        assert cache.max_size == MAX_CACHE_SIZE == 300
        assert cache.ttl == CACHE_TTL_SECONDS == 300.0
        assert len(cache) == 0

    def test_rejects_non_positive_size(self) -> None:
        """Test max_size below one is rejected."""
        with pytest.raises(ValueError, match="max_size must be at least 1, got 0"):
            QuoteCache(max_size=0)

    def test_rejects_non_positive_ttl(self) -> None:
        """Test a non-positive ttl is rejected."""
        with pytest.raises(ValueError, match="ttl must be positive"):
            QuoteCache(ttl=0)


class TestQuoteCacheFreshness:
    """Test the freshness window."""

    def test_fresh_entry_is_served(self) -> None:
        """Test an entry inside the window is returned."""
        clock = FakeClock()
        cache = QuoteCache(clock=clock)
        cache.put("k", RECORDS)

        clock.advance(299.9)
        entry = cache.get("k")

        assert entry is not None
        assert entry.records == RECORDS

    def test_entry_expires_at_ttl(self) -> None:
        """Test an entry exactly ttl seconds old is stale."""
        clock = FakeClock()
        cache = QuoteCache(clock=clock)
        cache.put("k", RECORDS)

        clock.advance(300.0)

        assert cache.get("k") is None

    def test_missing_key(self) -> None:
        """Test an absent key returns None."""
        assert QuoteCache().get("absent") is None

    def test_stale_entry_stays_until_overwritten(self) -> None:
        """Test expiry hides an entry without removing it."""
        clock = FakeClock()
        cache = QuoteCache(clock=clock)
        cache.put("k", RECORDS)
        clock.advance(500)

        assert cache.get("k") is None
        assert "k" in cache

        cache.put("k", RECORDS)
        assert cache.get("k") is not None

    def test_put_records_insertion_time(self) -> None:
        """Test entries are stamped with the clock at insertion."""
        clock = FakeClock(42.0)
        entry = QuoteCache(clock=clock).put("k", list(RECORDS))

        assert entry.created_at == 42.0
        assert entry.records == RECORDS


class TestQuoteCacheEviction:
    """Test capacity-bounded eviction."""

    def test_oldest_inserted_entry_is_evicted(self) -> None:
        """Test inserting past capacity evicts the earliest key first."""
        cache = QuoteCache(max_size=3)
        for key in ("a", "b", "c", "d"):
            cache.put(key, RECORDS)

        assert len(cache) == 3
        assert "a" not in cache
        assert all(key in cache for key in ("b", "c", "d"))

    def test_eviction_order_over_many_inserts(self) -> None:
        """Test recently inserted keys are never evicted before older ones."""
        cache = QuoteCache()
        for i in range(MAX_CACHE_SIZE + 5):
            cache.put(f"key-{i}", RECORDS)

        assert len(cache) == MAX_CACHE_SIZE
        assert all(f"key-{i}" not in cache for i in range(5))
        assert "key-5" in cache
        assert f"key-{MAX_CACHE_SIZE + 4}" in cache

    def test_overwrite_does_not_evict(self) -> None:
        """Test replacing an existing key keeps the cache size and order."""
        cache = QuoteCache(max_size=2)
        cache.put("a", RECORDS)
        cache.put("b", RECORDS)
        cache.put("a", RECORDS)

        assert len(cache) == 2

        cache.put("c", RECORDS)
        assert "a" not in cache
        assert "b" in cache

    def test_clear(self) -> None:
        """Test clear removes every entry."""
        cache = QuoteCache()
        cache.put("a", RECORDS)
        cache.clear()

        assert len(cache) == 0
