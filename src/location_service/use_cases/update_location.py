"""Update location use case."""

from __future__ import annotations

import logging
from dataclasses import replace

from location_service.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
)
from location_service.domain.location import Location, Seat, UpdateLocationRequest
from location_service.domain.seat_layout import SeatLayoutGenerator
from location_service.domain.validation import ValidationManager
from location_service.ports.location_repository import LocationRepository
from location_service.use_cases.refresh_location_cache import RefreshLocationCache
from location_service.use_cases.replies import LocationReply, log_failure

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The location could not be found."
NAME_TAKEN_MESSAGE = "Location name already exists."
NOT_UPDATED_MESSAGE = "The location could not be updated."
UNEXPECTED_ERROR_MESSAGE = "An error occurred while updating the location."


class UpdateLocation:
    """
    Use case for replacing a location's name, address and seat layout.

    Seats are regenerated only when the request asks for seats AND rows
    (seat_count > 0 and row_count > 0). Any other request keeps the stored
    seats exactly as they are, even when only gate_count differs.
    """

    def __init__(
        self,
        location_repository: LocationRepository,
        cache_refresher: RefreshLocationCache,
        validation_manager: ValidationManager | None = None,
        seat_layout_generator: SeatLayoutGenerator | None = None,
    ) -> None:
        self._repository = location_repository
        self._cache_refresher = cache_refresher
        self._validation = validation_manager or ValidationManager()
        self._seat_layout = seat_layout_generator or SeatLayoutGenerator()

    def execute(self, request: UpdateLocationRequest) -> LocationReply:
        try:
            self._update(request)
        except DomainError as error:
            log_failure(logger, "update_location", error)
            return LocationReply.failed(error)
        except Exception:
            logger.exception(
                "Unexpected error while updating location",
                extra={"location_id": getattr(request, "id", None)},
            )
            return LocationReply.failed(InternalError(UNEXPECTED_ERROR_MESSAGE))

        logger.info("Location updated", extra={"location_id": request.id})
        return LocationReply.success()

    def _update(self, request: UpdateLocationRequest) -> None:
        self._validation.validate_request_id(request.id, "ID").ensure_valid()

        existing = self._repository.get_by_id(request.id, include_seats=True)
        if existing is None:
            raise NotFoundError("Location", request.id, message=NOT_FOUND_MESSAGE)

        self._validation.validate_update_request(request).ensure_valid()

        if self._repository.exists_by_name(request.name, exclude_id=request.id):
            raise ConflictError(NAME_TAKEN_MESSAGE, name=request.name)

        if not self._repository.update(self._apply(existing, request)):
            raise InternalError(NOT_UPDATED_MESSAGE, location_id=request.id)

        self._cache_refresher.execute()

    def _apply(self, existing: Location, request: UpdateLocationRequest) -> Location:
        seats = existing.seats
        if request.replaces_seats:
            seats = tuple(
                Seat.from_spec(spec)
                for spec in self._seat_layout.generate(
                    request.seat_count, request.row_count, request.gate_count
                )
            )

        return replace(
            existing,
            name=request.name,
            street_name=request.street_name,
            postal_code=request.postal_code,
            city=request.city,
            seats=seats,
        )
