"""
Bounded memo of pairwise text similarities.

Keys are a scope plus the order-independent pair of each text's leading
characters. The scope separates lookups made against different IDF bases.
When an insertion pushes the size past max_size, the oldest half (insertion
order) is dropped, so the size never exceeds max_size after put().
"""

import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str, str]


class SimilarityCache:
    """Insertion-ordered similarity memo with half-size eviction."""

    def __init__(self, max_size: int = 1000, key_chars: int = 100):
        self.max_size = max_size
        self.key_chars = key_chars
        self._entries: Dict[CacheKey, float] = {}

    def make_key(self, text_a: str, text_b: str, scope: str = "") -> CacheKey:
        a = text_a[: self.key_chars]
        b = text_b[: self.key_chars]
        return (scope, a, b) if a <= b else (scope, b, a)

    def get(self, key: CacheKey) -> Optional[float]:
        return self._entries.get(key)

    def put(self, key: CacheKey, value: float) -> None:
        self._entries[key] = value
        if len(self._entries) > self.max_size:
            self._evict_oldest_half()

    def _evict_oldest_half(self) -> None:
        drop = len(self._entries) // 2
        for key in list(self._entries)[:drop]:
            del self._entries[key]
        logger.debug("[similarity_cache] EVICTED dropped=%s remaining=%s", drop, len(self._entries))

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> Dict[str, int]:
        return {"size": len(self._entries)}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries
