from __future__ import annotations

import logging

from location_service.domain.errors import InternalError
from location_service.use_cases.refresh_location_cache import RefreshLocationCache
from location_service.use_cases.replies import LocationListReply

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An error occurred while retrieving locations."


class GetAllLocations:
    """All locations sorted by name with seats; served from the cache when present."""

    def __init__(self, cache_refresher: RefreshLocationCache) -> None:
        self._cache_refresher = cache_refresher

    def execute(self) -> LocationListReply:
        try:
            locations = self._cache_refresher.cached()
            if locations is None:
                locations = self._cache_refresher.execute()
        except Exception:
            logger.exception("Unexpected error while retrieving locations")
            return LocationListReply.failed(InternalError(UNEXPECTED_ERROR_MESSAGE))

        return LocationListReply.success(locations)
