"""
Pydantic schemas for signup/login request/response validation.
"""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Username/password pair sent to signup and login."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Bearer token issued on successful signup or login."""

    token: str
