from __future__ import annotations

from abc import ABC, abstractmethod

from location_service.domain.location import Location


class LocationRepository(ABC):
    """
    Port for location persistence.

    A location is stored together with its seats as one aggregate.

    Contract:
        - Requests are pre-validated by the caller (UseCase)
        - Store failures are reported as False / None / [] and never raised
        - Deleting a location deletes its seats
        - The store enforces uniqueness of Location.name
    """

    @abstractmethod
    def create(self, location: Location) -> bool:
        """Persist a new location and its seats atomically."""
        ...

    @abstractmethod
    def exists_by_name(self, name: str, exclude_id: str | None = None) -> bool:
        """
        Check whether any location other than `exclude_id` uses `name`.

        Name comparison is case-sensitive.
        """
        ...

    @abstractmethod
    def exists_by_id(self, location_id: str) -> bool: ...

    @abstractmethod
    def get_by_id(self, location_id: str, include_seats: bool = True) -> Location | None: ...

    @abstractmethod
    def list_all_sorted_by_name(self, include_seats: bool = True) -> list[Location]: ...

    @abstractmethod
    def update(self, location: Location) -> bool:
        """
        Persist address fields and the seat collection of an existing location.

        The stored seat collection is replaced by `location.seats`.
        """
        ...

    @abstractmethod
    def delete_by_id(self, location_id: str) -> bool: ...
