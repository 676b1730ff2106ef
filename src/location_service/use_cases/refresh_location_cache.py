from __future__ import annotations

from datetime import timedelta

from location_service.domain.location import Location
from location_service.ports.location_cache import DEFAULT_CACHE_TTL, LocationCache
from location_service.ports.location_repository import LocationRepository

LOCATIONS_CACHE_KEY = "Locations"


class RefreshLocationCache:
    """
    Keeps the full location list cache in step with the store.

    A refresh always reloads every location (sorted by name, with seats) and
    overwrites the cache slot with a fresh TTL. There is no incremental
    merge, so the cache is never older than the last completed mutation.
    """

    def __init__(
        self,
        location_repository: LocationRepository,
        location_cache: LocationCache,
        ttl: timedelta = DEFAULT_CACHE_TTL,
    ) -> None:
        self._repository = location_repository
        self._cache = location_cache
        self._ttl = ttl

    def cached(self) -> list[Location] | None:
        """Current cache content, or None on a miss."""
        return self._cache.get(LOCATIONS_CACHE_KEY)

    def execute(self) -> list[Location]:
        locations = self._repository.list_all_sorted_by_name(include_seats=True)
        return self._cache.set(LOCATIONS_CACHE_KEY, locations, self._ttl)
