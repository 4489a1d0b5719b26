"""
JWT issuance and validation.

Tokens are HS256-signed with the configured secret. Verification is a
plain function of (token, settings) so it carries no global state.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from app.config import Settings
from app.core.exceptions import UnauthorizedException


@dataclass(frozen=True)
class Principal:
    """The authenticated caller."""

    user_id: int
    username: str


def create_access_token(user_id: int, username: str, settings: Settings) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: Database id of the user (stored as the ``sub`` claim)
        username: Login name, carried for display purposes
        settings: Application settings providing secret and lifetime

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "username": username,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Principal:
    """
    Validate a token and return the caller it identifies.

    Performs:
    1. Signature verification with the configured secret
    2. Expiration check
    3. Subject claim check

    Raises:
        UnauthorizedException: If the token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise UnauthorizedException("Token has expired")
    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")

    return extract_principal(payload)


def extract_principal(payload: dict[str, Any]) -> Principal:
    """Build a Principal from decoded claims."""
    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise UnauthorizedException("Token missing subject")

    return Principal(user_id=user_id, username=payload.get("username", ""))
