from __future__ import annotations

from dataclasses import replace

from location_service.domain.location import Location
from location_service.ports.location_repository import LocationRepository


class InMemoryLocationRepository(LocationRepository):
    """
    Canonical contract implementation for tests.

    - Stores locations keyed by id
    - Rejects a create or update that would duplicate a name (unique index)
    - Deleting a location drops its seats with it
    - Lists locations sorted by name
    """

    def __init__(self, locations: list[Location] | None = None) -> None:
        self._locations: dict[str, Location] = {
            location.id: location for location in locations or []
        }

    def create(self, location: Location) -> bool:
        if location.id in self._locations or self._name_taken(location.name, None):
            return False
        self._locations[location.id] = location
        return True

    def exists_by_name(self, name: str, exclude_id: str | None = None) -> bool:
        return self._name_taken(name, exclude_id)

    def exists_by_id(self, location_id: str) -> bool:
        return location_id in self._locations

    def get_by_id(self, location_id: str, include_seats: bool = True) -> Location | None:
        location = self._locations.get(location_id)
        if location is None:
            return None
        return location if include_seats else replace(location, seats=())

    def list_all_sorted_by_name(self, include_seats: bool = True) -> list[Location]:
        locations = sorted(self._locations.values(), key=lambda location: location.name)
        if include_seats:
            return locations
        return [replace(location, seats=()) for location in locations]

    def update(self, location: Location) -> bool:
        if location.id not in self._locations or self._name_taken(location.name, location.id):
            return False
        self._locations[location.id] = location
        return True

    def delete_by_id(self, location_id: str) -> bool:
        return self._locations.pop(location_id, None) is not None

    def _name_taken(self, name: str, exclude_id: str | None) -> bool:
        return any(
            location.name == name and location.id != exclude_id
            for location in self._locations.values()
        )
