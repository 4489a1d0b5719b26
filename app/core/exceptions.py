"""
Custom exceptions for the Artwork Catalog API.
Every exception renders as {"error": ..., "message": ..., "details": ...}.
"""

from typing import Any


class CatalogAPIException(Exception):
    """Base exception for all catalog API errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | list[Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class ValidationException(CatalogAPIException):
    """400 - Malformed request (missing or invalid fields)."""

    def __init__(self, message: str, details: dict[str, Any] | list[Any] | None = None):
        super().__init__(
            error="validation_failed",
            message=message,
            status_code=400,
            details=details,
        )


class UnauthorizedException(CatalogAPIException):
    """401 - Missing, invalid or expired token, or bad credentials."""

    def __init__(self, message: str = "Valid token required"):
        super().__init__(
            error="unauthorized",
            message=message,
            status_code=401,
        )


class WorkNotFoundException(CatalogAPIException):
    """404 - Work not found or not owned by the caller."""

    def __init__(self, work_id: int):
        super().__init__(
            error="not_found",
            message=f"Work with ID '{work_id}' not found or not authorized",
            status_code=404,
        )


class QueryFailureException(CatalogAPIException):
    """500 - Storage layer error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="query_failed",
            message=message,
            status_code=500,
            details=details,
        )
