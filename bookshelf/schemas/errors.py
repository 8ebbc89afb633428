"""
Error envelope returned by every failing HTTP endpoint.

Example:
    {
        "error": {
            "code": "validation_error",
            "msg": "name must not be blank",
            "details": {"field": "name"}
        }
    }
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    """
    Error body shared by all error responses.

    Attributes:
        code: Machine-readable error code for client-side error handling.
        msg: Human-readable error description for display.
        details: Optional additional context (field errors, ids, ...).
    """

    code: str = Field(
        ...,
        description="Machine-readable error code (e.g., 'validation_error', 'not_found')",
    )
    msg: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error context",
    )


class HTTPErrorResponse(BaseModel):
    """HTTP error response envelope."""

    error: ErrorEnvelope = Field(..., description="Error details envelope")
