"""Create location use case."""

from __future__ import annotations

import logging

from location_service.domain.errors import ConflictError, DomainError, InternalError
from location_service.domain.location import CreateLocationRequest, Location, Seat, new_id
from location_service.domain.seat_layout import SeatLayoutGenerator
from location_service.domain.validation import ValidationManager
from location_service.ports.location_repository import LocationRepository
from location_service.use_cases.refresh_location_cache import RefreshLocationCache
from location_service.use_cases.replies import LocationReply, log_failure

logger = logging.getLogger(__name__)

NAME_TAKEN_MESSAGE = "Location name already exists."
NOT_SAVED_MESSAGE = "The location could not be saved."
UNEXPECTED_ERROR_MESSAGE = "An error occurred while creating the location."


class CreateLocation:
    """
    Use case for creating a location together with its seat layout.

    Responsibilities:
    - Validate required fields, then the seat/row/gate policy
    - Reject a name that another location already uses
    - Generate the seat layout when seats are requested
    - Persist the aggregate and refresh the location cache
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

    def execute(self, request: CreateLocationRequest) -> LocationReply:
        """
        Execute the create location use case.

        Args:
            request: Name, address and seat layout counts

        Returns:
            LocationReply; never raises
        """
        try:
            location = self._create(request)
        except DomainError as error:
            log_failure(logger, "create_location", error)
            return LocationReply.failed(error)
        except Exception:
            logger.exception("Unexpected error while creating location")
            return LocationReply.failed(InternalError(UNEXPECTED_ERROR_MESSAGE))

        logger.info(
            "Location created",
            extra={"location_id": location.id, "seat_count": len(location.seats)},
        )
        return LocationReply.success()

    def _create(self, request: CreateLocationRequest) -> Location:
        self._validation.validate_create_request(request).ensure_valid()

        if self._repository.exists_by_name(request.name):
            raise ConflictError(NAME_TAKEN_MESSAGE, name=request.name)

        seats: tuple[Seat, ...] = ()
        if request.seat_count > 0:
            seats = tuple(
                Seat.from_spec(spec)
                for spec in self._seat_layout.generate(
                    request.seat_count, request.row_count, request.gate_count
                )
            )

        location = Location(
            id=new_id(),
            name=request.name,
            street_name=request.street_name,
            postal_code=request.postal_code,
            city=request.city,
            seats=seats,
        )

        if not self._repository.create(location):
            raise InternalError(NOT_SAVED_MESSAGE, name=request.name)

        self._cache_refresher.execute()
        return location
