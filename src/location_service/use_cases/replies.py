"""Tagged replies returned by the location use cases.

Every operation reports its outcome as a value (``succeeded`` plus an
optional message) instead of raising, so the transport always gets a
structured result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from location_service.domain.errors import DomainError, InternalError
from location_service.domain.location import Location


@dataclass(frozen=True, slots=True)
class LocationReply:
    succeeded: bool
    error_message: str | None = None
    error_code: str | None = None  # DomainError.error_code of the failure

    @classmethod
    def success(cls) -> LocationReply:
        return cls(succeeded=True)

    @classmethod
    def failed(cls, error: DomainError) -> LocationReply:
        return cls(succeeded=False, error_message=error.message, error_code=error.error_code)


@dataclass(frozen=True, slots=True)
class LocationByIdReply:
    succeeded: bool
    error_message: str | None = None
    error_code: str | None = None
    location: Location | None = None

    @classmethod
    def success(cls, location: Location) -> LocationByIdReply:
        return cls(succeeded=True, location=location)

    @classmethod
    def failed(cls, error: DomainError) -> LocationByIdReply:
        return cls(succeeded=False, error_message=error.message, error_code=error.error_code)


@dataclass(frozen=True, slots=True)
class LocationListReply:
    succeeded: bool
    error_message: str | None = None
    error_code: str | None = None
    locations: list[Location] = field(default_factory=list)

    @classmethod
    def success(cls, locations: list[Location]) -> LocationListReply:
        return cls(succeeded=True, locations=locations)

    @classmethod
    def failed(cls, error: DomainError) -> LocationListReply:
        return cls(succeeded=False, error_message=error.message, error_code=error.error_code)


def log_failure(logger: logging.Logger, operation: str, error: DomainError) -> None:
    """Log an expected failure: store failures at ERROR, client errors at INFO."""
    extra = {
        "operation": operation,
        "error_code": error.error_code,
        "error_message": error.message,
        "context": error.context,
    }
    if isinstance(error, InternalError):
        logger.error("Location operation failed", extra=extra)
    else:
        logger.info("Location request rejected", extra=extra)
