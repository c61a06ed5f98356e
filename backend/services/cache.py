"""Single-slot in-memory cache in front of the news fetcher. No Redis needed.

Note: Each uvicorn worker has its own cache instance, and concurrent misses
in one worker may each call the model (last write wins). This is acceptable
for this project's scale; the cache still eliminates repeated calls within
the freshness window.
"""

import logging
import time
from typing import Callable, NamedTuple

from services.news import NewsBundle

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60


class CacheEntry(NamedTuple):
    value: NewsBundle
    fetched_at: float


class NewsCache:
    def __init__(
        self,
        fetcher: Callable[[], NewsBundle],
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._fetcher = fetcher
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: CacheEntry | None = None

    def get(self) -> NewsBundle:
        """Return the cached bundle while fresh, otherwise fetch and store.

        A fetch that raises leaves the slot untouched.
        """
        now = self._clock()
        entry = self._entry
        if entry is not None and now - entry.fetched_at < self._ttl_seconds:
            return entry.value

        logger.info("News cache %s, fetching", "stale" if entry else "empty")
        bundle = self._fetcher()
        self._entry = CacheEntry(bundle, now)
        return bundle

    def state(self) -> str:
        """'empty', 'fresh' or 'stale', decided by age at call time."""
        entry = self._entry
        if entry is None:
            return "empty"
        if self._clock() - entry.fetched_at < self._ttl_seconds:
            return "fresh"
        return "stale"
