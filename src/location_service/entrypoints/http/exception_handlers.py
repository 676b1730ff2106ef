"""FastAPI exception handlers.

Use cases return tagged replies and do not raise; these handlers cover what
is left: malformed request payloads, domain errors raised outside a use case
and unexpected exceptions. All of them answer with an ErrorReply body.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from location_service.domain.errors import DomainError
from location_service.entrypoints.http.error_responses import ErrorDetail, ErrorReply
from location_service.entrypoints.http.mappers.location_mapper import STATUS_BY_ERROR_CODE

logger = logging.getLogger(__name__)


def _reply(status_code: int, reply: ErrorReply) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=reply.model_dump(exclude_none=True))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors with HTTP status mapping by error code.

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        JSON response with the tagged failure reply
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    log = logger.error if status_code >= 500 else logger.info
    log(
        "Domain error outside use case",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "context": exc.context,
            "path": request.url.path,
            "method": request.method,
        },
    )

    errors = getattr(exc, "errors", None)
    return _reply(
        status_code,
        ErrorReply(
            error_message=exc.message,
            error_code=exc.error_code,
            errors=[ErrorDetail(**error) for error in errors] if errors else None,
        ),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    These are type and shape errors at the HTTP layer, e.g. a missing body
    field or seat_count="many". Business rules are checked by the use cases.
    """
    errors = [
        ErrorDetail(
            # Drop the 'body' / 'path' / 'query' prefix from the location
            field=".".join(str(loc) for loc in error["loc"] if loc not in ("body", "path", "query")),
            message=error["msg"],
            code=error["type"],
        )
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={
            "errors": [error.model_dump() for error in errors],
            "path": request.url.path,
            "method": request.method,
        },
    )

    return _reply(
        422,  # HTTP_422_UNPROCESSABLE_CONTENT
        ErrorReply(
            error_message="Invalid request parameters",
            error_code="VALIDATION_ERROR",
            errors=errors,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors.

    Always logged with full traceback; the caller only gets a generic message.
    """
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return _reply(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorReply(error_message="An unexpected error occurred", error_code="INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
