"""
Authentication module for the Artwork Catalog API.
Password hashing, token issuance and bearer-token verification.
"""

from app.auth.jwt import Principal, create_access_token, decode_access_token
from app.auth.passwords import hash_password, verify_password
from app.auth.dependencies import get_current_user, CurrentUser

__all__ = [
    # JWT functions
    "Principal",
    "create_access_token",
    "decode_access_token",
    # Password functions
    "hash_password",
    "verify_password",
    # Dependencies
    "get_current_user",
    "CurrentUser",
]
