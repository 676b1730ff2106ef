from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta

from location_service.domain.location import Location

DEFAULT_CACHE_TTL = timedelta(minutes=10)


class LocationCache(ABC):
    """
    Port for the location list cache.

    Holds whole lists of locations under a key with a time-to-live.
    There is no per-item invalidation: writers always replace the full list.
    """

    @abstractmethod
    def get(self, key: str) -> list[Location] | None:
        """Return the cached list, or None if absent or expired."""
        ...

    @abstractmethod
    def set(
        self, key: str, locations: list[Location], ttl: timedelta = DEFAULT_CACHE_TTL
    ) -> list[Location]:
        """
        Replace the entry for `key` and return `locations`.

        Any existing entry is evicted first, so the new entry always gets a
        fresh TTL instead of inheriting the old one.
        """
        ...
