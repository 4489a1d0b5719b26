"""
User service - signup and credential checks.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.passwords import hash_password, verify_password
from app.core.exceptions import (
    QueryFailureException,
    UnauthorizedException,
    ValidationException,
)
from app.db.session import commit_or_fail
from app.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Service class for user accounts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_username(self, username: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.username == username))
        except SQLAlchemyError as e:
            raise QueryFailureException(f"Failed to load user: {e}")
        return result.scalar_one_or_none()

    async def register(self, username: str, password: str) -> User:
        """
        Create a user account.

        Raises:
            ValidationException: If the username is already taken
        """
        if await self.get_by_username(username) is not None:
            raise ValidationException("Username already taken", details={"username": username})

        user = User(username=username, password_hash=hash_password(password))
        self.db.add(user)

        try:
            await self.db.flush()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same name
            raise ValidationException("Username already taken", details={"username": username})
        except SQLAlchemyError as e:
            logger.error(f"Failed to create user {username}: {e}")
            raise QueryFailureException(f"Failed to create user: {e}")

        await commit_or_fail(self.db, f"signup of {username}")

        logger.info(f"Registered user {user.id} ({username})")
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """
        Check credentials.

        Unknown usernames and wrong passwords fail identically.

        Raises:
            UnauthorizedException: If the credentials do not match
        """
        user = await self.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            raise UnauthorizedException("Invalid username or password")
        return user
