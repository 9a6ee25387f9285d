"""Time-bounded, per-locale cache of remote dictionaries.

One instance is constructed per process and injected into the resolver.
Expiry is evaluated lazily when an entry is read; there is no background
eviction.
"""

import time
from typing import Any, Callable, Dict, Optional

import structlog

from infrastructure.i18n.models import CacheEntry, Dictionary

logger = structlog.get_logger().bind(component="i18n.cache")


class DictionaryCache:
    """In-memory cache holding at most one entry per locale.

    Entries are immutable and replaced by a single dict assignment, so a
    concurrent reader observes either the previous entry or the new one.
    No lock is shared across locales.

    Attributes:
        ttl_seconds: Maximum age of an entry before it counts as expired.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            ttl_seconds: Time-to-live for entries, in seconds.
            clock: Source of the current time; monotonic seconds by default.
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self._expirations = 0

    def get(self, locale: str) -> Optional[CacheEntry]:
        """Get the live entry for a locale.

        Args:
            locale: Locale code.

        Returns:
            The cached entry, or None if absent or expired.
        """
        entry = self._entries.get(locale)
        if entry is None:
            self._misses += 1
            return None
        if self.is_expired(entry):
            self._expirations += 1
            self._misses += 1
            logger.debug(
                "dictionary_cache_entry_expired",
                locale=locale,
                age_seconds=round(self._clock() - entry.fetched_at, 3),
            )
            return None
        self._hits += 1
        return entry

    def set(self, locale: str, dictionary: Dictionary) -> CacheEntry:
        """Store a dictionary for a locale, replacing any previous entry.

        Args:
            locale: Locale code.
            dictionary: Dictionary fetched from the remote store.

        Returns:
            The newly stored entry.
        """
        entry = CacheEntry(locale=locale, dictionary=dictionary, fetched_at=self._clock())
        self._entries[locale] = entry
        logger.debug("dictionary_cached", locale=locale, key_count=len(dictionary))
        return entry

    def is_expired(self, entry: CacheEntry) -> bool:
        """Check whether an entry has reached its time-to-live."""
        return self._clock() - entry.fetched_at >= self.ttl_seconds

    def invalidate(self, locale: str) -> bool:
        """Drop the entry for a locale.

        Returns:
            True if an entry was removed.
        """
        removed = self._entries.pop(locale, None) is not None
        if removed:
            logger.info("dictionary_cache_invalidated", locale=locale)
        return removed

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()
        logger.info("dictionary_cache_cleared")

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with entry count, cached locales, and hit/miss counters.
        """
        return {
            "entries": len(self._entries),
            "locales": sorted(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "expirations": self._expirations,
            "ttl_seconds": self.ttl_seconds,
        }
