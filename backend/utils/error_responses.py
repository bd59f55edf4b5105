"""Builders for the JSON error envelope.

Every error body carries ``status`` (``fail`` for 4xx, ``error`` for 5xx) and
``message``, plus the request ID and a UTC timestamp taken from the current
context.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from fastapi import HTTPException
from fastapi import status as http_status

from backend.schemas.error import (
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from backend.utils.request_context import get_request_id

__all__ = [
    "ConflictError",
    "build_error_response",
    "build_validation_error_response",
    "envelope_status",
    "error_type_for_status",
]

_STATUS_ERROR_TYPES: dict[int, ErrorType] = {
    http_status.HTTP_401_UNAUTHORIZED: ErrorType.AUTHENTICATION_ERROR,
    http_status.HTTP_403_FORBIDDEN: ErrorType.AUTHORIZATION_ERROR,
    http_status.HTTP_404_NOT_FOUND: ErrorType.NOT_FOUND,
    http_status.HTTP_409_CONFLICT: ErrorType.CONFLICT,
    422: ErrorType.VALIDATION_ERROR,
    http_status.HTTP_504_GATEWAY_TIMEOUT: ErrorType.TIMEOUT_ERROR,
}


class ConflictError(HTTPException):
    """400 raised when a request would duplicate an existing record."""

    error_type = ErrorType.CONFLICT

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=http_status.HTTP_400_BAD_REQUEST, detail=detail)


def _current_timestamp() -> datetime:
    """Return a timezone-aware timestamp for error payloads.

    Kept as a tiny helper so unit tests can monkeypatch the clock.
    """

    return datetime.now(UTC)


def envelope_status(status_code: int) -> str:
    """Return ``fail`` for client errors and ``error`` for server errors."""

    return "error" if status_code >= 500 else "fail"


def error_type_for_status(status_code: int) -> ErrorType:
    """Map an HTTP status code onto the closest :class:`ErrorType`."""

    if status_code in _STATUS_ERROR_TYPES:
        return _STATUS_ERROR_TYPES[status_code]
    if status_code >= 500:
        return ErrorType.INTERNAL_ERROR
    return ErrorType.BAD_REQUEST


def build_validation_error_response(
    *,
    errors: Sequence[ValidationErrorDetail],
    message: str,
    detail: str,
    status_code: int,
    path: str,
    error_type: ErrorType = ErrorType.VALIDATION_ERROR,
    request_id: str | None = None,
) -> ValidationErrorResponse:
    """Construct a ``ValidationErrorResponse`` enriched with metadata.

    The ``errors`` iterable is eagerly converted to a list to shield callers
    from accidentally reusing a generator after the response has been created.
    """

    resolved_request_id = request_id or get_request_id()
    return ValidationErrorResponse(
        status=envelope_status(status_code),
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=resolved_request_id,
        path=path,
        errors=list(errors),
    )


def build_error_response(
    *,
    error_type: ErrorType,
    message: str,
    detail: str | None,
    status_code: int,
    path: str,
    retry_after: int | None = None,
    request_id: str | None = None,
) -> ErrorResponse:
    """Construct a generic ``ErrorResponse`` enriched with metadata."""

    resolved_request_id = request_id or get_request_id()
    return ErrorResponse(
        status=envelope_status(status_code),
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=resolved_request_id,
        path=path,
        retry_after=retry_after,
    )
