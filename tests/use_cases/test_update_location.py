"""Test suite for UpdateLocation use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from location_service.adapters.in_memory_location_cache import InMemoryLocationCache
from location_service.adapters.in_memory_location_repository import InMemoryLocationRepository
from location_service.domain.location import (
    CreateLocationRequest,
    UpdateLocationRequest,
)
from location_service.ports.location_repository import LocationRepository
from location_service.use_cases.create_location import CreateLocation
from location_service.use_cases.refresh_location_cache import RefreshLocationCache
from location_service.use_cases.replies import LocationReply
from location_service.use_cases.update_location import UpdateLocation


@pytest.fixture()
def repository() -> InMemoryLocationRepository:
    return InMemoryLocationRepository()


@pytest.fixture()
def refresher(repository: InMemoryLocationRepository) -> RefreshLocationCache:
    return RefreshLocationCache(repository, InMemoryLocationCache())


@pytest.fixture()
def use_case(
    repository: InMemoryLocationRepository, refresher: RefreshLocationCache
) -> UpdateLocation:
    return UpdateLocation(location_repository=repository, cache_refresher=refresher)


@pytest.fixture()
def location_id(repository: InMemoryLocationRepository, refresher: RefreshLocationCache) -> str:
    """Create "Test Arena" with 20 seats in 4 rows and return its id."""
    CreateLocation(repository, refresher).execute(
        CreateLocationRequest(
            name="Test Arena",
            street_name="Test Street",
            postal_code="12345",
            city="TestCity",
            seat_count=20,
            row_count=4,
            gate_count=2,
        )
    )
    return repository.list_all_sorted_by_name()[0].id


def make_request(location_id: str, **overrides) -> UpdateLocationRequest:
    values = {
        "id": location_id,
        "name": "Updated Arena",
        "street_name": "Updated Street",
        "postal_code": "99999",
        "city": "UpdatedCity",
        "seat_count": 0,
        "row_count": 0,
        "gate_count": 0,
    }
    values.update(overrides)
    return UpdateLocationRequest(**values)


# ==============================================================================
# Happy Path
# ==============================================================================


def test_update_replaces_address_and_keeps_seats_when_counts_are_zero(
    use_case: UpdateLocation, repository: InMemoryLocationRepository, location_id: str
) -> None:
    original_seats = repository.get_by_id(location_id).seats

    reply = use_case.execute(make_request(location_id))

    assert reply == LocationReply(succeeded=True)
    location = repository.get_by_id(location_id)
    assert location.name == "Updated Arena"
    assert location.street_name == "Updated Street"
    assert location.postal_code == "99999"
    assert location.city == "UpdatedCity"
    assert location.seats == original_seats


def test_update_regenerates_seats_when_seats_and_rows_given(
    use_case: UpdateLocation, repository: InMemoryLocationRepository, location_id: str
) -> None:
    original_ids = {seat.seat_id for seat in repository.get_by_id(location_id).seats}

    reply = use_case.execute(make_request(location_id, seat_count=30, row_count=3, gate_count=1))

    assert reply.succeeded
    seats = repository.get_by_id(location_id).seats
    assert len(seats) == 30
    assert {seat.row for seat in seats} == {"A", "B", "C"}
    assert original_ids.isdisjoint(seat.seat_id for seat in seats)


def test_update_keeps_own_name(
    use_case: UpdateLocation, repository: InMemoryLocationRepository, location_id: str
) -> None:
    reply = use_case.execute(make_request(location_id, name="Test Arena"))

    assert reply.succeeded
    assert repository.get_by_id(location_id).name == "Test Arena"


def test_update_refreshes_cache(
    use_case: UpdateLocation, refresher: RefreshLocationCache, location_id: str
) -> None:
    use_case.execute(make_request(location_id))

    [cached] = refresher.cached()
    assert cached.name == "Updated Arena"
    assert len(cached.seats) == 20


# ==============================================================================
# Failures
# ==============================================================================


def test_update_requires_id(use_case: UpdateLocation) -> None:
    reply = use_case.execute(make_request(""))

    assert reply == LocationReply(
        succeeded=False, error_message="ID is required.", error_code="VALIDATION_ERROR"
    )


def test_update_unknown_location(use_case: UpdateLocation) -> None:
    reply = use_case.execute(make_request("missing"))

    assert reply.succeeded is False
    assert reply.error_message == "The location could not be found."
    assert reply.error_code == "NOT_FOUND"


def test_update_not_found_reported_before_field_errors(use_case: UpdateLocation) -> None:
    reply = use_case.execute(make_request("missing", name=""))

    assert reply.error_message == "The location could not be found."


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"city": ""}, "One or more required fields are missing."),
        ({"gate_count": -1}, "'GateCount' cannot be a negative value."),
        (
            {"seat_count": 10, "row_count": 10, "gate_count": 1},
            "Rows must be less than the number of seats.",
        ),
        (
            {"seat_count": 0, "row_count": 0, "gate_count": 2},
            "Rows and Gates cannot have values when no seats are provided.",
        ),
    ],
)
def test_update_rejects_invalid_request(
    use_case: UpdateLocation,
    repository: InMemoryLocationRepository,
    location_id: str,
    overrides: dict,
    message: str,
) -> None:
    reply = use_case.execute(make_request(location_id, **overrides))

    assert reply.error_message == message
    assert reply.error_code == "VALIDATION_ERROR"
    assert repository.get_by_id(location_id).name == "Test Arena"


def test_update_rejects_name_of_another_location(
    use_case: UpdateLocation,
    repository: InMemoryLocationRepository,
    refresher: RefreshLocationCache,
    location_id: str,
) -> None:
    CreateLocation(repository, refresher).execute(
        CreateLocationRequest(name="Other Hall", street_name="S", postal_code="1", city="C")
    )
    snapshot = refresher.cached()

    reply = use_case.execute(make_request(location_id, name="Other Hall"))

    assert reply.error_message == "Location name already exists."
    assert reply.error_code == "CONFLICT"
    assert repository.get_by_id(location_id).name == "Test Arena"
    assert refresher.cached() == snapshot


def test_update_reports_store_failure(
    refresher: RefreshLocationCache, repository: InMemoryLocationRepository, location_id: str
) -> None:
    failing = Mock(spec=LocationRepository)
    failing.get_by_id.return_value = repository.get_by_id(location_id)
    failing.exists_by_name.return_value = False
    failing.update.return_value = False
    use_case = UpdateLocation(location_repository=failing, cache_refresher=refresher)

    reply = use_case.execute(make_request(location_id))

    assert reply.error_message == "The location could not be updated."
    assert reply.error_code == "INTERNAL_ERROR"
    failing.exists_by_name.assert_called_once_with("Updated Arena", exclude_id=location_id)


def test_update_unexpected_error_returns_generic_failure(location_id: str) -> None:
    failing = Mock(spec=LocationRepository)
    failing.get_by_id.side_effect = RuntimeError("db down")
    use_case = UpdateLocation(
        location_repository=failing, cache_refresher=Mock(spec=RefreshLocationCache)
    )

    reply = use_case.execute(make_request(location_id))

    assert reply == LocationReply(
        succeeded=False,
        error_message="An error occurred while updating the location.",
        error_code="INTERNAL_ERROR",
    )


def test_update_malformed_request_returns_generic_failure(use_case: UpdateLocation) -> None:
    reply = use_case.execute(None)  # type: ignore[arg-type]

    assert reply == LocationReply(
        succeeded=False,
        error_message="An error occurred while updating the location.",
        error_code="INTERNAL_ERROR",
    )
