"""REST API error response models.

Every non-2xx response from the API uses this body shape.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, used inside validation failures."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "vehicle_id",
                "message": "Must be a positive integer",
                "code": "INVALID_ID",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Not found:
            {"detail": "Vehicle with identifier '42' not found", "code": "NOT_FOUND"}

        Storage failure:
            {"detail": "Vehicle query failed", "code": "QUERY_FAILED"}
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '42' not found", "code": "NOT_FOUND"},
                {"detail": "Vehicle query failed", "code": "QUERY_FAILED"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "vehicle_id",
                            "message": "Must be a positive integer",
                            "code": "INVALID_ID",
                        }
                    ],
                },
            ]
        }
    )
