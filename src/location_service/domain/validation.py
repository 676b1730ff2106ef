"""Validation pipeline for location requests.

Validators return a ValidationResult instead of raising, so callers can
compose them and stop at the first failure. Use cases turn a failed result
into a ValidationError via ``ensure_valid()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from location_service.domain.errors import ValidationError
from location_service.domain.location import CreateLocationRequest, UpdateLocationRequest


@dataclass(frozen=True, slots=True)
class ValidationResult:
    is_valid: bool
    error_message: str | None = None

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def failed(cls, error_message: str) -> ValidationResult:
        return cls(is_valid=False, error_message=error_message)

    def ensure_valid(self) -> None:
        """
        Raises:
            ValidationError: If the result is a failure
        """
        if not self.is_valid:
            raise ValidationError(self.error_message)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class FieldValidator:
    """
    Structural checks on request objects.

    Each request shape lists its required string fields (REQUIRED_STRINGS)
    and its integer fields (COUNTS) as (wire name, attribute) pairs.
    """

    def validate_fields(self, model: Any) -> ValidationResult:
        if model is None:
            return ValidationResult.failed("Required fields are missing.")

        for _, attribute in model.REQUIRED_STRINGS:
            if _is_blank(getattr(model, attribute)):
                return ValidationResult.failed("One or more required fields are missing.")

        for wire_name, attribute in model.COUNTS:
            if getattr(model, attribute) < 0:
                return ValidationResult.failed(f"'{wire_name}' cannot be a negative value.")

        return ValidationResult.success()

    def validate_identifier(self, value: str | None, field_name: str) -> ValidationResult:
        if _is_blank(value):
            return ValidationResult.failed(f"{field_name} is required.")
        return ValidationResult.success()


class SeatCountValidator:
    """Cross-field policy for the (seat_count, row_count, gate_count) triple."""

    def validate(self, seat_count: int, row_count: int, gate_count: int) -> ValidationResult:
        if seat_count == 0 and (row_count > 0 or gate_count > 0):
            return ValidationResult.failed(
                "Rows and Gates cannot have values when no seats are provided."
            )

        if seat_count > 0:
            if row_count <= 0 or gate_count <= 0:
                return ValidationResult.failed(
                    "Rows or Gates must be greater than 0 when seats are provided."
                )
            if row_count >= seat_count:
                return ValidationResult.failed("Rows must be less than the number of seats.")
            if gate_count >= seat_count:
                return ValidationResult.failed("Gates must be less than the number of seats.")

        return ValidationResult.success()


class ValidationManager:
    """
    Per-operation validation sequences.

    Field checks always run before the seat policy so that a missing field
    is reported ahead of a seat-count problem.
    """

    def __init__(
        self,
        field_validator: FieldValidator | None = None,
        seat_count_validator: SeatCountValidator | None = None,
    ) -> None:
        self._fields = field_validator or FieldValidator()
        self._seats = seat_count_validator or SeatCountValidator()

    def validate_create_request(self, request: CreateLocationRequest) -> ValidationResult:
        return self._validate_request(request)

    def validate_update_request(self, request: UpdateLocationRequest) -> ValidationResult:
        return self._validate_request(request)

    def validate_request_id(self, value: str | None, field_name: str) -> ValidationResult:
        return self._fields.validate_identifier(value, field_name)

    def _validate_request(
        self, request: CreateLocationRequest | UpdateLocationRequest
    ) -> ValidationResult:
        result = self._fields.validate_fields(request)
        if not result.is_valid:
            return result

        return self._seats.validate(request.seat_count, request.row_count, request.gate_count)
