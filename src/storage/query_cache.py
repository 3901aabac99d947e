# src/storage/query_cache.py

"""In-memory TTL cache for decoded API responses."""

import logging
import time
from dataclasses import dataclass
from typing import Any

from src.config.settings import Settings

logger = logging.getLogger("storefront.cache")


@dataclass
class CacheEntry:
    """A decoded payload fetched from one endpoint."""

    endpoint: str
    payload: Any
    timestamp: float


class ResponseCache:
    """Keeps GET payloads for a revalidation window.

    Entries older than the TTL are treated as absent and evicted on
    the next lookup, so a stale catalog is refetched transparently.
    """

    def __init__(self, ttl: float | None = None) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._ttl: float = Settings.CACHE_TTL if ttl is None else ttl

    def get(self, endpoint: str) -> Any | None:
        """Return the cached payload for *endpoint*, or ``None`` on miss."""
        self._evict_expired(time.time())
        entry = self._entries.get(endpoint)
        if entry is None:
            return None
        logger.debug("Cache hit for '%s'", endpoint)
        return entry.payload

    def store(self, endpoint: str, payload: Any) -> None:
        """Remember *payload* as the latest response of *endpoint*."""
        self._entries[endpoint] = CacheEntry(
            endpoint=endpoint,
            payload=payload,
            timestamp=time.time(),
        )
        logger.debug("Cached response for '%s'", endpoint)

    def invalidate(self, prefix: str) -> int:
        """Drop entries whose endpoint starts with *prefix*.

        Returns the number of entries that were removed.
        """
        stale = [key for key in self._entries if key.startswith(prefix)]
        for key in stale:
            del self._entries[key]
        logger.info(
            "Invalidated %d cache entries under '%s'", len(stale), prefix
        )
        return len(stale)

    def clear(self) -> int:
        """Purge all cached entries.

        Returns the number of entries that were removed.
        """
        count = len(self._entries)
        self._entries.clear()
        logger.info("Cache manually purged (%d entries removed)", count)
        return count

    def _evict_expired(self, now: float) -> None:
        """Remove entries older than the TTL threshold."""
        before = len(self._entries)
        self._entries = {
            key: entry
            for key, entry in self._entries.items()
            if now - entry.timestamp < self._ttl
        }
        evicted = before - len(self._entries)
        if evicted:
            logger.debug("Evicted %d expired cache entries", evicted)

    def __len__(self) -> int:
        return len(self._entries)
