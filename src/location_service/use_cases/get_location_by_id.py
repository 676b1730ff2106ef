"""Get location by ID use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from location_service.domain.errors import DomainError, InternalError, NotFoundError
from location_service.domain.location import Location
from location_service.domain.validation import ValidationManager
from location_service.use_cases.refresh_location_cache import RefreshLocationCache
from location_service.use_cases.replies import LocationByIdReply, log_failure

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The location could not be found."
UNEXPECTED_ERROR_MESSAGE = "An error occurred while retrieving the location."


@dataclass(frozen=True, slots=True)
class GetLocationByIdRequest:
    """Request to get a location by ID."""

    location_id: str


def _find(locations: list[Location], location_id: str) -> Location | None:
    return next((location for location in locations if location.id == location_id), None)


class GetLocationById:
    """
    Use case for retrieving a single location by ID.

    The cached list is searched first; on a miss (no cache entry, or the id
    is not in it) the cache is refreshed from the store and searched again,
    so a stale snapshot never produces a false "not found".
    """

    def __init__(
        self,
        cache_refresher: RefreshLocationCache,
        validation_manager: ValidationManager | None = None,
    ) -> None:
        self._cache_refresher = cache_refresher
        self._validation = validation_manager or ValidationManager()

    def execute(self, request: GetLocationByIdRequest) -> LocationByIdReply:
        try:
            location = self._get(request.location_id)
        except DomainError as error:
            log_failure(logger, "get_location_by_id", error)
            return LocationByIdReply.failed(error)
        except Exception:
            logger.exception(
                "Unexpected error while retrieving location",
                extra={"location_id": getattr(request, "location_id", None)},
            )
            return LocationByIdReply.failed(InternalError(UNEXPECTED_ERROR_MESSAGE))

        return LocationByIdReply.success(location)

    def _get(self, location_id: str) -> Location:
        self._validation.validate_request_id(location_id, "ID").ensure_valid()

        cached = self._cache_refresher.cached()
        if cached is not None:
            match = _find(cached, location_id)
            if match is not None:
                return match

        match = _find(self._cache_refresher.execute(), location_id)
        if match is None:
            raise NotFoundError("Location", location_id, message=NOT_FOUND_MESSAGE)

        return match
