"""In-memory cache with per-entry expiry."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from unsplash_mcp.logs import log_cache_operation

# Configure logging
logger = logging.getLogger(__name__)

# Default TTL in seconds
DEFAULT_TTL = 300  # 5 minutes


def _now_ms() -> float:
    return time.time() * 1000


@dataclass
class CacheEntry:
    """A cached payload and its absolute expiry (epoch milliseconds)."""

    value: Any
    expiry: float

    def is_expired(self, now: float) -> bool:
        return now > self.expiry


class TTLCache:
    """Time-bounded key-value cache.

    Features:
    - Per-entry TTL expressed in whole seconds
    - Lazy removal of expired entries on access
    - Explicit sweep via cleanup(); there is no background eviction

    Not thread-safe. One instance belongs to one scraper and is only
    touched from the event loop thread.
    """

    def __init__(self, default_ttl: int = DEFAULT_TTL) -> None:
        """Initialize the cache.

        Args:
            default_ttl: TTL in seconds used when set() gets none (default: 300)
        """
        self.default_ttl = default_ttl
        self._entries: dict[str, CacheEntry] = {}

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store a value, replacing any existing entry for the key.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Lifetime in seconds (default: the cache's default TTL)
        """
        seconds = ttl or self.default_ttl
        self._entries[key] = CacheEntry(value=value, expiry=_now_ms() + seconds * 1000)
        log_cache_operation("SET", key)

    def get(self, key: str) -> Any | None:
        """Get a value if present and not expired.

        Expired entries are deleted as a side effect.

        Args:
            key: Cache key

        Returns:
            Cached value, or None when missing or expired
        """
        entry = self._entries.get(key)

        if entry is None:
            log_cache_operation("MISS", key)
            return None

        if entry.is_expired(_now_ms()):
            del self._entries[key]
            log_cache_operation("EXPIRED", key)
            return None

        log_cache_operation("HIT", key)
        return entry.value

    def has(self, key: str) -> bool:
        """Check whether a live entry exists, deleting it if expired."""
        entry = self._entries.get(key)

        if entry is None:
            return False

        if entry.is_expired(_now_ms()):
            del self._entries[key]
            return False

        return True

    def delete(self, key: str) -> bool:
        """Delete an entry.

        Args:
            key: Cache key to delete

        Returns:
            True if key existed and was deleted, False otherwise
        """
        if self._entries.pop(key, None) is None:
            return False

        log_cache_operation("DELETE", key)
        return True

    def clear(self) -> None:
        """Remove all entries."""
        count = len(self._entries)
        self._entries.clear()
        log_cache_operation("CLEAR", f"{count} items")

    def size(self) -> int:
        """Number of stored entries, including expired ones not yet swept."""
        return len(self._entries)

    def cleanup(self) -> int:
        """Remove every expired entry.

        Returns:
            Number of expired entries removed
        """
        now = _now_ms()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]

        for key in expired:
            del self._entries[key]

        if expired:
            logger.info(f"Removed {len(expired)} expired entries from cache")

        return len(expired)

    def __len__(self) -> int:
        return self.size()
