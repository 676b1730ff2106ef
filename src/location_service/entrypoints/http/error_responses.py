"""REST API error reply models.

Failures raised outside the use cases (malformed payloads, unexpected
exceptions) are answered in the same tagged shape as use case replies.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "seat_count",
                "message": "Input should be a valid integer",
                "code": "int_parsing",
            }
        }
    )


class ErrorReply(BaseModel):
    """Tagged failure reply.

    Examples:
        Simple error:
            {
                "succeeded": false,
                "error_message": "An unexpected error occurred",
                "error_code": "INTERNAL_ERROR"
            }

        Malformed payload:
            {
                "succeeded": false,
                "error_message": "Invalid request parameters",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "seat_count",
                        "message": "Input should be a valid integer",
                        "code": "int_parsing"
                    }
                ]
            }
    """

    succeeded: bool = False
    error_message: str
    error_code: str | None = None
    errors: list[ErrorDetail] | None = None
