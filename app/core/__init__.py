"""Core utilities and exceptions for the Artwork Catalog API."""

from app.core.exceptions import (
    CatalogAPIException,
    QueryFailureException,
    UnauthorizedException,
    ValidationException,
    WorkNotFoundException,
)

__all__ = [
    "CatalogAPIException",
    "QueryFailureException",
    "UnauthorizedException",
    "ValidationException",
    "WorkNotFoundException",
]
