"""
Database session management for async SQLAlchemy.
PostgreSQL is the default, with a SQLite fallback for local development.

The engine lives on a ``Database`` handle created at application startup
and disposed at shutdown; request handlers receive sessions through the
``get_db`` dependency.
"""

import logging
import os
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.config import Settings
from app.core.exceptions import QueryFailureException

logger = logging.getLogger(__name__)


def resolve_database_url(settings: Settings) -> tuple[str, bool]:
    """
    Pick the database URL to connect to.

    An explicit DATABASE_URL environment variable always wins. Otherwise the
    SQLite fallback is used when enabled.

    Returns:
        Tuple of (database URL, whether the SQLite fallback is in use)
    """
    env_database_url = os.environ.get("DATABASE_URL")

    if env_database_url:
        return env_database_url, False
    if settings.USE_SQLITE_FALLBACK:
        return settings.SQLITE_FALLBACK_URL, True
    return settings.DATABASE_URL, False


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    SQLite does NOT enforce foreign keys by default.
    Enable them on every connection so ON DELETE CASCADE works.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """Process-wide database handle: one engine plus its session factory."""

    def __init__(self, url: str, echo: bool = False, sqlite_fallback: bool = False):
        self.url = url
        self.sqlite_fallback = sqlite_fallback

        if url.startswith("sqlite"):
            self.engine = create_async_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
            )
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_async_engine(
                url,
                echo=echo,
                pool_size=5,
                max_overflow=10,
                pool_pre_ping=True,
            )

        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    async def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        from app.db.base import Base
        # Import all models to register them
        from app.models import Tag, User, Work, work_tags  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database connections closed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.
    Commits on success, rolls back on any error.

    Usage:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    database: Database = request.app.state.database
    async with database.sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def commit_or_fail(session: AsyncSession, action: str) -> None:
    """
    Commit the request's work before a response is built.

    Raises:
        QueryFailureException: If the commit fails; the session is rolled back
    """
    try:
        await session.commit()
    except SQLAlchemyError as e:
        logger.error(f"Commit failed for {action}: {e}")
        await session.rollback()
        raise QueryFailureException(f"Failed to save changes: {e}")
