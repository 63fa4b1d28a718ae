"""
Error Response Schemas

Every non-2xx response has the same body:

    {"message": "...", "errors": [{"field": "...", "message": "..."}]}

errors is only present for validation failures.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One failing field of a validation error."""

    field: str = Field(..., description="Name of the offending field")
    message: str = Field(..., description="Why the field was rejected")


class ErrorResponse(BaseModel):
    """Body returned for 4xx/5xx responses."""

    message: str = Field(..., description="Human-readable error summary")
    errors: list[ErrorDetail] | None = Field(
        default=None,
        description="Per-field messages (validation failures only)",
    )
