from pydantic import BaseModel, ConfigDict, Field


class LocationWriteDTO(BaseModel):
    """Fields shared by create and update payloads.

    Counts are not range-checked here: the domain validator owns the seat
    policy and its messages are returned verbatim.
    """

    name: str = Field(
        description="Location name, unique across all locations (case-sensitive)",
        examples=["Globe Arena"],
    )
    street_name: str = Field(description="Street address", examples=["Arenavägen 1"])
    postal_code: str = Field(description="Postal code", examples=["121 77"])
    city: str = Field(description="City", examples=["Stockholm"])
    seat_count: int = Field(
        default=0,
        description="Total number of seats; 0 for a location without seating",
        examples=[120],
    )
    row_count: int = Field(
        default=0,
        description="Number of rows the seats are spread over (< seat_count)",
        examples=[10],
    )
    gate_count: int = Field(
        default=0,
        description="Number of gates the rows are grouped into (< seat_count)",
        examples=[2],
    )


class LocationCreateDTO(LocationWriteDTO):
    """Request payload for creating a location."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Globe Arena",
                "street_name": "Arenavägen 1",
                "postal_code": "121 77",
                "city": "Stockholm",
                "seat_count": 120,
                "row_count": 10,
                "gate_count": 2,
            }
        }
    )


class LocationUpdateDTO(LocationWriteDTO):
    """Request payload for replacing a location.

    Seats are regenerated only when both seat_count and row_count are > 0.
    """


class SeatResponseDTO(BaseModel):
    id: str
    seat_number: str
    row: str
    gate: str


class LocationResponseDTO(BaseModel):
    id: str
    name: str
    street_name: str
    postal_code: str
    city: str
    seats: list[SeatResponseDTO]


class LocationReplyDTO(BaseModel):
    """Tagged outcome of a create, update or delete."""

    succeeded: bool
    error_message: str | None = None
    error_code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"succeeded": True, "error_message": None, "error_code": None},
                {
                    "succeeded": False,
                    "error_message": "Location name already exists.",
                    "error_code": "CONFLICT",
                },
            ]
        }
    )


class LocationByIdReplyDTO(LocationReplyDTO):
    location: LocationResponseDTO | None = None


class LocationListReplyDTO(LocationReplyDTO):
    locations: list[LocationResponseDTO] = Field(default_factory=list)
