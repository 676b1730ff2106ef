"""Delete location use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from location_service.domain.errors import DomainError, InternalError, NotFoundError
from location_service.domain.validation import ValidationManager
from location_service.ports.location_repository import LocationRepository
from location_service.use_cases.refresh_location_cache import RefreshLocationCache
from location_service.use_cases.replies import LocationReply, log_failure

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No location found with given ID."
NOT_DELETED_MESSAGE = "The location could not be deleted."
UNEXPECTED_ERROR_MESSAGE = "An error occurred while deleting the location."


@dataclass(frozen=True, slots=True)
class DeleteLocationRequest:
    location_id: str


class DeleteLocation:
    """
    Use case for deleting a location and, by cascade, its seats.

    The existence check and the delete are separate store calls. A location
    removed by a concurrent request in between is reported as "could not be
    deleted" rather than "not found".
    """

    def __init__(
        self,
        location_repository: LocationRepository,
        cache_refresher: RefreshLocationCache,
        validation_manager: ValidationManager | None = None,
    ) -> None:
        self._repository = location_repository
        self._cache_refresher = cache_refresher
        self._validation = validation_manager or ValidationManager()

    def execute(self, request: DeleteLocationRequest) -> LocationReply:
        try:
            self._delete(request.location_id)
        except DomainError as error:
            log_failure(logger, "delete_location", error)
            return LocationReply.failed(error)
        except Exception:
            logger.exception(
                "Unexpected error while deleting location",
                extra={"location_id": getattr(request, "location_id", None)},
            )
            return LocationReply.failed(InternalError(UNEXPECTED_ERROR_MESSAGE))

        logger.info("Location deleted", extra={"location_id": request.location_id})
        return LocationReply.success()

    def _delete(self, location_id: str) -> None:
        self._validation.validate_request_id(location_id, "ID").ensure_valid()

        if not self._repository.exists_by_id(location_id):
            raise NotFoundError("Location", location_id, message=NOT_FOUND_MESSAGE)

        if not self._repository.delete_by_id(location_id):
            raise InternalError(NOT_DELETED_MESSAGE, location_id=location_id)

        self._cache_refresher.execute()
