"""PostgreSQL implementation of LocationRepository."""

from __future__ import annotations

import logging

from sqlalchemy import ColumnElement, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from location_service.domain.location import Location, Seat
from location_service.infra.db.models.location import LocationRow, LocationSeatRow
from location_service.ports.location_repository import LocationRepository

logger = logging.getLogger(__name__)


class PostgresLocationRepository(LocationRepository):
    """
    PostgreSQL implementation of LocationRepository.

    - Uses SQLAlchemy ORM for database access
    - Loads seats eagerly with SELECT ... IN when requested
    - Commits each mutation and rolls back on failure
    - Converts LocationRow (infrastructure) to Location (domain)
    - Reports SQLAlchemy errors as False / None / [] after logging them
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def create(self, location: Location) -> bool:
        row = LocationRow(
            id=location.id,
            name=location.name,
            street_name=location.street_name,
            postal_code=location.postal_code,
            city=location.city,
            seats=[self._to_seat_row(seat) for seat in location.seats],
        )
        try:
            self._session.add(row)
            self._session.commit()
            return True
        except SQLAlchemyError:
            self._rollback("create", location.id)
            return False

    def exists_by_name(self, name: str, exclude_id: str | None = None) -> bool:
        condition = LocationRow.name == name
        if exclude_id is not None:
            condition = condition & (LocationRow.id != exclude_id)
        return self._exists(condition, "exists_by_name")

    def exists_by_id(self, location_id: str) -> bool:
        return self._exists(LocationRow.id == location_id, "exists_by_id")

    def get_by_id(self, location_id: str, include_seats: bool = True) -> Location | None:
        """
        Get location by ID.

        Args:
            location_id: Location ID
            include_seats: Load the seat collection as well

        Returns:
            Location if found, None if missing or the query failed
        """
        query = select(LocationRow).where(LocationRow.id == location_id)
        if include_seats:
            query = query.options(selectinload(LocationRow.seats))

        try:
            row = self._session.execute(query).scalar_one_or_none()
        except SQLAlchemyError:
            self._rollback("get_by_id", location_id)
            return None

        return self._to_domain(row, include_seats) if row else None

    def list_all_sorted_by_name(self, include_seats: bool = True) -> list[Location]:
        query = select(LocationRow).order_by(LocationRow.name)
        if include_seats:
            query = query.options(selectinload(LocationRow.seats))

        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError:
            self._rollback("list_all_sorted_by_name")
            return []

        return [self._to_domain(row, include_seats) for row in rows]

    def update(self, location: Location) -> bool:
        """
        Update address fields and, if it changed, the seat collection.

        The seat collection counts as changed when the set of seat ids
        differs; replaced seat rows are removed as orphans.
        """
        try:
            row = self._session.get(
                LocationRow, location.id, options=[selectinload(LocationRow.seats)]
            )
            if row is None:
                return False

            row.name = location.name
            row.street_name = location.street_name
            row.postal_code = location.postal_code
            row.city = location.city

            stored_seat_ids = {seat.seat_id for seat in row.seats}
            if stored_seat_ids != {seat.seat_id for seat in location.seats}:
                row.seats = [self._to_seat_row(seat) for seat in location.seats]

            self._session.commit()
            return True
        except SQLAlchemyError:
            self._rollback("update", location.id)
            return False

    def delete_by_id(self, location_id: str) -> bool:
        try:
            row = self._session.get(LocationRow, location_id)
            if row is None:
                return False

            # location_seats rows go with it via ON DELETE CASCADE
            self._session.delete(row)
            self._session.commit()
            return True
        except SQLAlchemyError:
            self._rollback("delete_by_id", location_id)
            return False

    def _exists(self, condition: ColumnElement[bool], operation: str) -> bool:
        try:
            return bool(self._session.execute(select(exists().where(condition))).scalar())
        except SQLAlchemyError:
            self._rollback(operation)
            return False

    def _rollback(self, operation: str, location_id: str | None = None) -> None:
        logger.error(
            "Location store operation failed",
            exc_info=True,
            extra={"operation": operation, "location_id": location_id},
        )
        self._session.rollback()

    @staticmethod
    def _to_seat_row(seat: Seat) -> LocationSeatRow:
        return LocationSeatRow(
            seat_id=seat.seat_id,
            seat_number=seat.seat_number,
            row=seat.row,
            gate=seat.gate,
        )

    @staticmethod
    def _to_domain(row: LocationRow, include_seats: bool) -> Location:
        """
        Convert database model (LocationRow) to domain entity (Location).

        Args:
            row: SQLAlchemy LocationRow model
            include_seats: Whether row.seats was loaded

        Returns:
            Location domain entity
        """
        seats = (
            tuple(
                Seat(
                    seat_id=seat.seat_id,
                    seat_number=seat.seat_number,
                    row=seat.row,
                    gate=seat.gate,
                )
                for seat in row.seats
            )
            if include_seats
            else ()
        )
        return Location(
            id=row.id,
            name=row.name,
            street_name=row.street_name,
            postal_code=row.postal_code,
            city=row.city,
            seats=seats,
        )
