"""Contract tests for InMemoryLocationRepository."""

from __future__ import annotations

import pytest

from location_service.adapters.in_memory_location_repository import InMemoryLocationRepository
from location_service.domain.location import Location, Seat


def make_location(location_id: str, name: str, seats: int = 0) -> Location:
    return Location(
        id=location_id,
        name=name,
        street_name="Main Street",
        postal_code="12345",
        city="Springfield",
        seats=tuple(
            Seat(seat_id=f"{location_id}-s{i}", seat_number=str(i + 1), row="A", gate="1")
            for i in range(seats)
        ),
    )


@pytest.fixture()
def repository() -> InMemoryLocationRepository:
    return InMemoryLocationRepository(
        [
            make_location("2", "Opera House", seats=3),
            make_location("1", "Arena", seats=2),
        ]
    )


# ==============================================================================
# Create
# ==============================================================================


def test_create_stores_location(repository: InMemoryLocationRepository) -> None:
    location = make_location("3", "Stadium")

    assert repository.create(location) is True
    assert repository.get_by_id("3") == location


def test_create_rejects_duplicate_name(repository: InMemoryLocationRepository) -> None:
    assert repository.create(make_location("3", "Arena")) is False
    assert repository.get_by_id("3") is None


def test_create_rejects_duplicate_id(repository: InMemoryLocationRepository) -> None:
    assert repository.create(make_location("1", "Stadium")) is False
    assert repository.get_by_id("1").name == "Arena"


# ==============================================================================
# Queries
# ==============================================================================


def test_exists_by_name_is_case_sensitive(repository: InMemoryLocationRepository) -> None:
    assert repository.exists_by_name("Arena") is True
    assert repository.exists_by_name("arena") is False


def test_exists_by_name_can_exclude_an_id(repository: InMemoryLocationRepository) -> None:
    assert repository.exists_by_name("Arena", exclude_id="1") is False
    assert repository.exists_by_name("Arena", exclude_id="2") is True


def test_exists_by_id(repository: InMemoryLocationRepository) -> None:
    assert repository.exists_by_id("1") is True
    assert repository.exists_by_id("missing") is False


def test_get_by_id_with_and_without_seats(repository: InMemoryLocationRepository) -> None:
    assert len(repository.get_by_id("2").seats) == 3
    assert repository.get_by_id("2", include_seats=False).seats == ()
    assert repository.get_by_id("missing") is None


def test_list_all_is_sorted_by_name(repository: InMemoryLocationRepository) -> None:
    locations = repository.list_all_sorted_by_name()

    assert [location.name for location in locations] == ["Arena", "Opera House"]
    assert [len(location.seats) for location in locations] == [2, 3]


def test_list_all_without_seats(repository: InMemoryLocationRepository) -> None:
    locations = repository.list_all_sorted_by_name(include_seats=False)

    assert all(location.seats == () for location in locations)


def test_list_all_empty() -> None:
    assert InMemoryLocationRepository().list_all_sorted_by_name() == []


# ==============================================================================
# Update and Delete
# ==============================================================================


def test_update_replaces_location(repository: InMemoryLocationRepository) -> None:
    updated = make_location("1", "Big Arena", seats=5)

    assert repository.update(updated) is True
    assert repository.get_by_id("1") == updated


def test_update_keeps_own_name(repository: InMemoryLocationRepository) -> None:
    assert repository.update(make_location("1", "Arena", seats=1)) is True


def test_update_rejects_name_of_another_location(repository: InMemoryLocationRepository) -> None:
    assert repository.update(make_location("1", "Opera House")) is False
    assert repository.get_by_id("1").name == "Arena"


def test_update_missing_location(repository: InMemoryLocationRepository) -> None:
    assert repository.update(make_location("missing", "Nowhere")) is False


def test_delete_removes_location_and_seats(repository: InMemoryLocationRepository) -> None:
    assert repository.delete_by_id("2") is True
    assert repository.exists_by_id("2") is False
    assert repository.delete_by_id("2") is False
