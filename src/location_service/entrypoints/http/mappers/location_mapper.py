from __future__ import annotations

from fastapi import status

from location_service.domain.location import (
    CreateLocationRequest,
    Location,
    Seat,
    UpdateLocationRequest,
)
from location_service.entrypoints.http.dtos.location import (
    LocationByIdReplyDTO,
    LocationCreateDTO,
    LocationListReplyDTO,
    LocationReplyDTO,
    LocationResponseDTO,
    LocationUpdateDTO,
    SeatResponseDTO,
)
from location_service.use_cases.replies import (
    LocationByIdReply,
    LocationListReply,
    LocationReply,
)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class LocationMapper:
    """Maps between REST DTOs and domain models for locations."""

    @staticmethod
    def to_create_request(dto: LocationCreateDTO) -> CreateLocationRequest:
        return CreateLocationRequest(
            name=dto.name,
            street_name=dto.street_name,
            postal_code=dto.postal_code,
            city=dto.city,
            seat_count=dto.seat_count,
            row_count=dto.row_count,
            gate_count=dto.gate_count,
        )

    @staticmethod
    def to_update_request(location_id: str, dto: LocationUpdateDTO) -> UpdateLocationRequest:
        """
        Builds the domain update request; the id comes from the path.

        Args:
            location_id: Path parameter identifying the location
            dto: Replacement name, address and seat layout counts

        Returns:
            UpdateLocationRequest
        """
        return UpdateLocationRequest(
            id=location_id,
            name=dto.name,
            street_name=dto.street_name,
            postal_code=dto.postal_code,
            city=dto.city,
            seat_count=dto.seat_count,
            row_count=dto.row_count,
            gate_count=dto.gate_count,
        )

    @staticmethod
    def to_seat_response(seat: Seat) -> SeatResponseDTO:
        return SeatResponseDTO(
            id=seat.seat_id,
            seat_number=seat.seat_number,
            row=seat.row,
            gate=seat.gate,
        )

    @staticmethod
    def to_location_response(location: Location) -> LocationResponseDTO:
        return LocationResponseDTO(
            id=location.id,
            name=location.name,
            street_name=location.street_name,
            postal_code=location.postal_code,
            city=location.city,
            seats=[LocationMapper.to_seat_response(seat) for seat in location.seats],
        )

    @staticmethod
    def to_reply(reply: LocationReply) -> LocationReplyDTO:
        return LocationReplyDTO(
            succeeded=reply.succeeded,
            error_message=reply.error_message,
            error_code=reply.error_code,
        )

    @staticmethod
    def to_by_id_reply(reply: LocationByIdReply) -> LocationByIdReplyDTO:
        return LocationByIdReplyDTO(
            succeeded=reply.succeeded,
            error_message=reply.error_message,
            error_code=reply.error_code,
            location=(
                LocationMapper.to_location_response(reply.location)
                if reply.location is not None
                else None
            ),
        )

    @staticmethod
    def to_list_reply(reply: LocationListReply) -> LocationListReplyDTO:
        return LocationListReplyDTO(
            succeeded=reply.succeeded,
            error_message=reply.error_message,
            error_code=reply.error_code,
            locations=[LocationMapper.to_location_response(location) for location in reply.locations],
        )

    @staticmethod
    def status_code(
        reply: LocationReply | LocationByIdReply | LocationListReply,
        success: int = status.HTTP_200_OK,
    ) -> int:
        """
        HTTP status for a reply: `success` when it succeeded, otherwise
        derived from its error code (400 for unknown codes).
        """
        if reply.succeeded:
            return success
        return STATUS_BY_ERROR_CODE.get(reply.error_code or "", status.HTTP_400_BAD_REQUEST)
