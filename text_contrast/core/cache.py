"""
Memoization store for text color decisions.
"""

from typing import Dict, Optional

from text_contrast.utils.logger import get_logger

logger = get_logger(__name__)


class DecisionCache:
    """
    Unbounded mapping from a cache key to a decided text color.

    Entries are never evicted; only clear() removes them. Not thread-safe,
    callers sharing one cache across threads must serialize access.
    """

    def __init__(self):
        self._entries: Dict[str, str] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[str]:
        """Return the cached decision for key, or None, updating hit counters."""
        value = self._entries.get(key)
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        size = len(self._entries)
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        logger.debug(f"Decision cache cleared ({size} entries)")

    def stats(self) -> Dict[str, int]:
        return {"size": len(self._entries), "hits": self.hits, "misses": self.misses}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DecisionCache(size={len(self._entries)}, hits={self.hits}, misses={self.misses})"
