from fastapi import APIRouter, Depends, Response, status

from location_service.entrypoints.http.dependencies import (
    get_create_location_use_case,
    get_delete_location_use_case,
    get_get_all_locations_use_case,
    get_get_location_by_id_use_case,
    get_update_location_use_case,
)
from location_service.entrypoints.http.dtos.location import (
    LocationByIdReplyDTO,
    LocationCreateDTO,
    LocationListReplyDTO,
    LocationReplyDTO,
    LocationUpdateDTO,
)
from location_service.entrypoints.http.mappers.location_mapper import LocationMapper
from location_service.use_cases.create_location import CreateLocation
from location_service.use_cases.delete_location import DeleteLocation, DeleteLocationRequest
from location_service.use_cases.get_all_locations import GetAllLocations
from location_service.use_cases.get_location_by_id import (
    GetLocationById,
    GetLocationByIdRequest,
)
from location_service.use_cases.update_location import UpdateLocation


router = APIRouter(tags=["Locations"])

# Every endpoint answers with the tagged reply body; failures only change the status.
_FAILURE_RESPONSES = {
    404: {"model": LocationReplyDTO, "description": "Location not found"},
    409: {"model": LocationReplyDTO, "description": "Location name already exists"},
    422: {"model": LocationReplyDTO, "description": "Validation error"},
    500: {"model": LocationReplyDTO, "description": "Store or cache failure"},
}


@router.post(
    "/locations",
    response_model=LocationReplyDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create location",
    description="""
    Create a location and generate its seat layout.

    ## Seat layout
    - seat_count = 0 creates a location without seats (rows and gates must be 0)
    - Otherwise 0 < row_count < seat_count and 0 < gate_count < seat_count
    - Seats are spread evenly over rows labelled A, B, ..., Z, AA, AB, ...
    - Rows are grouped into gates "1", "2", ... in contiguous blocks
    """,
    responses=_FAILURE_RESPONSES,
)
def create_location(
    payload: LocationCreateDTO,
    response: Response,
    use_case: CreateLocation = Depends(get_create_location_use_case),
) -> LocationReplyDTO:
    reply = use_case.execute(LocationMapper.to_create_request(payload))

    response.status_code = LocationMapper.status_code(reply, success=status.HTTP_201_CREATED)
    return LocationMapper.to_reply(reply)


@router.get(
    "/locations",
    response_model=LocationListReplyDTO,
    summary="List locations",
    description="All locations with their seats, sorted by name.",
    responses={500: _FAILURE_RESPONSES[500]},
)
def get_all_locations(
    response: Response,
    use_case: GetAllLocations = Depends(get_get_all_locations_use_case),
) -> LocationListReplyDTO:
    reply = use_case.execute()

    response.status_code = LocationMapper.status_code(reply)
    return LocationMapper.to_list_reply(reply)


@router.get(
    "/locations/{location_id}",
    response_model=LocationByIdReplyDTO,
    summary="Get location by ID",
    responses=_FAILURE_RESPONSES,
)
def get_location_by_id(
    location_id: str,
    response: Response,
    use_case: GetLocationById = Depends(get_get_location_by_id_use_case),
) -> LocationByIdReplyDTO:
    reply = use_case.execute(GetLocationByIdRequest(location_id=location_id))

    response.status_code = LocationMapper.status_code(reply)
    return LocationMapper.to_by_id_reply(reply)


@router.put(
    "/locations/{location_id}",
    response_model=LocationReplyDTO,
    summary="Replace location",
    description="""
    Replace name and address of a location.

    The seat layout is regenerated only when seat_count > 0 and row_count > 0;
    otherwise the existing seats are kept as they are.
    """,
    responses=_FAILURE_RESPONSES,
)
def update_location(
    location_id: str,
    payload: LocationUpdateDTO,
    response: Response,
    use_case: UpdateLocation = Depends(get_update_location_use_case),
) -> LocationReplyDTO:
    reply = use_case.execute(LocationMapper.to_update_request(location_id, payload))

    response.status_code = LocationMapper.status_code(reply)
    return LocationMapper.to_reply(reply)


@router.delete(
    "/locations/{location_id}",
    response_model=LocationReplyDTO,
    summary="Delete location",
    description="Delete a location together with its seats.",
    responses=_FAILURE_RESPONSES,
)
def delete_location(
    location_id: str,
    response: Response,
    use_case: DeleteLocation = Depends(get_delete_location_use_case),
) -> LocationReplyDTO:
    reply = use_case.execute(DeleteLocationRequest(location_id=location_id))

    response.status_code = LocationMapper.status_code(reply)
    return LocationMapper.to_reply(reply)
