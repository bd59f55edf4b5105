"""Error response schemas for consistent error handling."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    """Types of errors that can occur."""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BAD_REQUEST = "bad_request"
    DATABASE_ERROR = "database_error"
    INTERNAL_ERROR = "internal_error"
    TIMEOUT_ERROR = "timeout_error"
    AUTHENTICATION_ERROR = "authentication_error"
    AUTHORIZATION_ERROR = "authorization_error"


class ErrorResponse(BaseModel):
    """Standardized error response model.

    ``status`` and ``message`` are the fields mobile clients read; the rest
    is diagnostic metadata.
    """

    status: Literal["fail", "error"] = Field(
        ..., description="'fail' for client errors (4xx), 'error' for server errors (5xx)"
    )
    message: str = Field(..., description="Human-readable error message")
    error_type: ErrorType = Field(..., description="Category of error")
    detail: str | None = Field(None, description="Additional error details or context")
    status_code: int = Field(..., description="HTTP status code")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When error occurred"
    )
    request_id: str | None = Field(None, description="Unique request identifier for tracking")
    path: str | None = Field(None, description="Request path that caused the error")
    retry_after: int | None = Field(
        None, description="Seconds to wait before retrying (for timeout errors)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "fail",
                "message": "Pokémon with id 9999 not found",
                "error_type": "not_found",
                "detail": None,
                "status_code": 404,
                "timestamp": "2025-11-03T10:30:00Z",
                "request_id": "0f5b7a4e-2a8b-4a43-9a57-1f0d1c3e7b11",
                "path": "/pokemon/9999/favourite",
                "retry_after": None,
            }
        }
    )


class ValidationErrorDetail(BaseModel):
    """Details for validation errors."""

    field: str = Field(..., description="Field that failed validation")
    message: str = Field(..., description="Validation error message")
    value: Any = Field(None, description="Value that failed validation")


class ValidationErrorResponse(ErrorResponse):
    """Extended error response for validation errors."""

    error_type: ErrorType = Field(default=ErrorType.VALIDATION_ERROR)
    errors: list[ValidationErrorDetail] = Field(
        default_factory=list, description="List of validation errors"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "fail",
                "message": "Request validation failed",
                "error_type": "validation_error",
                "detail": "1 validation error(s)",
                "status_code": 422,
                "timestamp": "2025-11-03T10:30:00Z",
                "request_id": "0f5b7a4e-2a8b-4a43-9a57-1f0d1c3e7b11",
                "path": "/auth/register",
                "errors": [
                    {"field": "body.email", "message": "value is not a valid email address", "value": "ash"},
                ],
            }
        }
    )
