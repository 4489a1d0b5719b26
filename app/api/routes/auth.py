"""
Signup and login endpoints.
Both return a bearer token for use with the authenticated endpoints.
"""

from fastapi import APIRouter

from app.auth.jwt import create_access_token
from app.dependencies import AppSettings, DbSession
from app.schemas.auth import Credentials, TokenResponse
from app.services.user_service import UserService

router = APIRouter()


@router.post("/signup", response_model=TokenResponse)
async def signup(body: Credentials, db: DbSession, settings: AppSettings):
    """
    Create an account and return a token for it.

    Fails with 400 if the username is already taken.
    """
    user = await UserService(db).register(body.username, body.password)
    token = create_access_token(user.id, user.username, settings)
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
async def login(body: Credentials, db: DbSession, settings: AppSettings):
    """Exchange username and password for a token."""
    user = await UserService(db).authenticate(body.username, body.password)
    token = create_access_token(user.id, user.username, settings)
    return TokenResponse(token=token)
