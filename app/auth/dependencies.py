"""
Authentication dependencies for FastAPI.
Provides dependency injection for authenticated endpoints.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from app.auth.jwt import Principal, decode_access_token
from app.config import Settings, get_settings
from app.core.exceptions import UnauthorizedException


async def get_current_user(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: str | None = Header(default=None),
) -> Principal:
    """
    Dependency to get the current authenticated user.

    Validates the bearer token from the Authorization header.

    Raises:
        UnauthorizedException: If authentication fails
    """
    if not authorization:
        raise UnauthorizedException("Authorization header required")

    # Extract token from "Bearer <token>" format
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise UnauthorizedException("Invalid authorization header format")

    principal = decode_access_token(parts[1], settings)

    # Store in request state
    request.state.user = principal

    return principal


# Type alias for dependency injection
CurrentUser = Annotated[Principal, Depends(get_current_user)]
