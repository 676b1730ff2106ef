from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Callable

from location_service.domain.location import Location
from location_service.ports.location_cache import DEFAULT_CACHE_TTL, LocationCache


class InMemoryLocationCache(LocationCache):
    """
    Process-local TTL cache.

    - One entry per key, expired lazily on read
    - `set` evicts then inserts under a lock, so readers never see a
      half-replaced entry
    - Lists are copied on the way in and out; the Location values themselves
      are immutable and shared
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, list[Location]]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> list[Location] | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            expires_at, locations = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None

            return list(locations)

    def set(
        self, key: str, locations: list[Location], ttl: timedelta = DEFAULT_CACHE_TTL
    ) -> list[Location]:
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (self._clock() + ttl.total_seconds(), list(locations))
        return locations
