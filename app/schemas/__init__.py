"""
Pydantic schemas for request/response validation.
"""

from app.schemas.auth import Credentials, TokenResponse
from app.schemas.work import (
    SuccessResponse,
    WorkCreate,
    WorkCreated,
    WorkResponse,
    WorkSearch,
)
from app.schemas.error import ErrorResponse, ValidationErrorResponse

__all__ = [
    # Auth schemas
    "Credentials",
    "TokenResponse",
    # Work schemas
    "WorkCreate",
    "WorkCreated",
    "WorkResponse",
    "WorkSearch",
    "SuccessResponse",
    # Error schemas
    "ErrorResponse",
    "ValidationErrorResponse",
]
