from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_id() -> str:
    """Opaque identifier for locations and seats."""
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class SeatSpec:
    """Seat descriptor produced by the layout generator, before it has an id."""

    seat_number: str
    row: str
    gate: str


@dataclass(frozen=True, slots=True)
class Seat:
    seat_id: str
    seat_number: str
    row: str
    gate: str

    @classmethod
    def from_spec(cls, spec: SeatSpec) -> Seat:
        return cls(
            seat_id=new_id(),
            seat_number=spec.seat_number,
            row=spec.row,
            gate=spec.gate,
        )


@dataclass(frozen=True, slots=True)
class Location:
    """
    Location aggregate: address fields plus the seats it exclusively owns.

    Instances are immutable so the same objects can be shared between the
    repository, the cache and callers without defensive copies.
    """

    id: str
    name: str
    street_name: str
    postal_code: str
    city: str
    seats: tuple[Seat, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class CreateLocationRequest:
    name: str
    street_name: str
    postal_code: str
    city: str
    seat_count: int = 0
    row_count: int = 0
    gate_count: int = 0

    # Wire spelling used in validation messages
    REQUIRED_STRINGS = (
        ("Name", "name"),
        ("StreetName", "street_name"),
        ("PostalCode", "postal_code"),
        ("City", "city"),
    )
    COUNTS = (
        ("SeatCount", "seat_count"),
        ("RowCount", "row_count"),
        ("GateCount", "gate_count"),
    )


@dataclass(frozen=True, slots=True)
class UpdateLocationRequest:
    id: str
    name: str
    street_name: str
    postal_code: str
    city: str
    seat_count: int = 0
    row_count: int = 0
    gate_count: int = 0

    REQUIRED_STRINGS = (
        ("Id", "id"),
        ("Name", "name"),
        ("StreetName", "street_name"),
        ("PostalCode", "postal_code"),
        ("City", "city"),
    )
    COUNTS = CreateLocationRequest.COUNTS

    @property
    def replaces_seats(self) -> bool:
        """Seats are regenerated only when both seats and rows are requested."""
        return self.seat_count > 0 and self.row_count > 0
