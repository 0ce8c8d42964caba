"""
Error response format.

Success bodies are route-specific (the storefront consumes them as-is); every
failure shares this shape.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer


class ErrorResponse(BaseModel):
    """Unified error body."""
    error: str
    code: int
    type: str
    details: Optional[Any] = None
    field: Optional[str] = None
    request_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_serializer("timestamp")
    def serialize_timestamp(self, timestamp: datetime) -> str:
        """UTC ISO8601 ending in Z."""
        ts = timestamp
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        else:
            ts = ts.astimezone(timezone.utc)
        return ts.isoformat().replace("+00:00", "Z")


def error_response(
    code: int,
    message: str,
    error_type: str = "BusinessError",
    details: Optional[Any] = None,
    field: Optional[str] = None,
    request_id: Optional[str] = None,
) -> ErrorResponse:
    """
    Build an error body.

    Args:
        code: business status code
        message: human-readable message
        error_type: error type name
        details: diagnostic details (omitted for unexpected errors outside development)
        field: offending request field, if any
        request_id: request id of the failing call

    Returns:
        ErrorResponse
    """
    return ErrorResponse(
        error=message,
        code=code,
        type=error_type,
        details=details,
        field=field,
        request_id=request_id,
    )
