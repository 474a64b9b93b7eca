"""In-memory caching of generated quote batches."""

from .manager import QuoteCache, make_fingerprint
from .models import CacheEntry

__all__ = ["CacheEntry", "QuoteCache", "make_fingerprint"]
