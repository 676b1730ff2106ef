"""Domain error classes.

Protocol-agnostic errors that represent business failures.
Use cases translate them into tagged replies; the HTTP adapter maps their
error codes to status codes.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be translated to
    a tagged reply or an HTTP response.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message, surfaced verbatim to callers
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Request validation error.

    Examples:
        - Required field missing or blank
        - Negative seat, row or gate count
        - Seat layout policy violation (rows >= seats)

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        message: str | None = None,
        **context: Any,
    ) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Location")
            identifier: Resource identifier
            message: Overrides the generated message when given
            **context: Additional context
        """
        if message is None:
            if identifier:
                message = f"{resource} with identifier '{identifier}' not found"
            else:
                message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Location name already taken by another location

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class InternalError(DomainError):
    """Internal error (store or cache failure, unexpected conditions).

    Should be logged for investigation. The message is generic; the cause
    is never surfaced to the caller.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
