"""
Tag service - Lazy tag creation and prefix suggestions.
"""

import logging
from typing import Iterable, Sequence

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import QueryFailureException
from app.models.associations import work_tags
from app.models.tag import Tag

logger = logging.getLogger(__name__)

# Dialect-specific INSERT constructs supporting ON CONFLICT DO NOTHING
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class TagService:
    """Service class for tag operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _insert(self, table):
        dialect = self.db.get_bind().dialect.name
        try:
            return _UPSERT_INSERTS[dialect](table)
        except KeyError:
            raise QueryFailureException(f"Unsupported database dialect: {dialect}") from None

    async def find_id(self, name: str) -> int | None:
        """Id of the tag with exactly this name, or None."""
        result = await self.db.execute(select(Tag.id).where(Tag.name == name))
        return result.scalar_one_or_none()

    async def get_or_create(self, name: str) -> int:
        """
        Look up a tag by exact name, creating it on first use.

        Two writers racing to create the same name both end up with the
        single row the unique constraint lets through.

        Args:
            name: Tag name (case-sensitive)

        Returns:
            Tag id
        """
        tag_id = await self.find_id(name)
        if tag_id is not None:
            return tag_id

        stmt = (
            self._insert(Tag.__table__)
            .values(name=name)
            .on_conflict_do_nothing(index_elements=["name"])
        )
        await self.db.execute(stmt)

        # Re-fetch: the row is ours or the concurrent winner's
        result = await self.db.execute(select(Tag.id).where(Tag.name == name))
        return result.scalar_one()

    async def attach_to_work(self, work_id: int, tag_names: Iterable[str]) -> list[int]:
        """
        Ensure each named tag exists and is linked to the work.

        Duplicate names are processed once and existing links are left
        untouched.

        Returns:
            Ids of the linked tags, in first-seen order
        """
        try:
            tag_ids = [await self.get_or_create(name) for name in dict.fromkeys(tag_names)]
            if tag_ids:
                stmt = (
                    self._insert(work_tags)
                    .values([{"work_id": work_id, "tag_id": tag_id} for tag_id in tag_ids])
                    .on_conflict_do_nothing(index_elements=["work_id", "tag_id"])
                )
                await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to attach tags to work {work_id}: {e}")
            raise QueryFailureException(f"Failed to save tags: {e}")

        return tag_ids

    async def suggest(self, prefix: str | None, limit: int = 10) -> Sequence[str]:
        """
        Suggest tag names starting with a prefix.

        Matching is case-insensitive and the prefix is taken literally
        (``%`` and ``_`` are not wildcards).

        Args:
            prefix: Leading characters typed so far
            limit: Maximum number of names to return

        Returns:
            Tag names in alphabetical order
        """
        query = select(Tag.name)
        if prefix:
            query = query.where(Tag.name.istartswith(prefix, autoescape=True))
        query = query.order_by(func.lower(Tag.name), Tag.name).limit(limit)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Tag suggestion query failed: {e}")
            raise QueryFailureException(f"Failed to load tag suggestions: {e}")

        return result.scalars().all()
