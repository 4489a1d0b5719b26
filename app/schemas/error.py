"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        400: {"error": "validation_failed", "message": "..."}
        401: {"error": "unauthorized", "message": "Valid token required"}
        404: {"error": "not_found", "message": "Work with ID '7' not found or not authorized"}
        500: {"error": "query_failed", "message": "..."}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["validation_failed", "unauthorized", "not_found", "query_failed"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | list[Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )


class ValidationErrorDetail(BaseModel):
    """Detail for validation errors."""

    loc: list[str | int]
    msg: str
    type: str


class ValidationErrorResponse(BaseModel):
    """Response for validation errors (400)."""

    error: str = "validation_failed"
    message: str = "Request validation failed"
    details: list[ValidationErrorDetail]
