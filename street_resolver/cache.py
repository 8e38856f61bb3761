"""
Short-lived in-memory cache of the street list per restaurant and ZIP.

Street lists change only when the seeding tool runs, so a warm process can
skip the store round trip for a few minutes. Entries expire lazily: a stale
entry is dropped the next time its own key is read.
"""
import threading
import time
from typing import Callable, Dict, List, Optional

from loguru import logger

from street_resolver.config import CACHE_TTL_SECONDS
from street_resolver.models import CacheEntry, StreetRecord


def cache_key(restaurant_id: str, zip_code: str) -> str:
    return f"{restaurant_id}#{zip_code}"


class CandidateCache:
    """TTL cache keyed by "{restaurant_id}#{zip_code}"."""

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, restaurant_id: str, zip_code: str) -> Optional[List[StreetRecord]]:
        """Return the cached streets, or None on a miss or an expired entry."""
        key = cache_key(restaurant_id, zip_code)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.timestamp < self.ttl_seconds:
                logger.debug(f"Cache HIT for {key}")
                return entry.streets
            del self._entries[key]
        logger.debug(f"Cache EXPIRED for {key}")
        return None

    def put(self, restaurant_id: str, zip_code: str, streets: List[StreetRecord]) -> None:
        key = cache_key(restaurant_id, zip_code)
        with self._lock:
            self._entries[key] = CacheEntry(streets=list(streets), timestamp=self._clock())
        logger.debug(f"Cache SET for {key} ({len(streets)} streets)")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
