"""
Search service - resolves (type, tags, user) into matching works.

A work matches a non-empty tag filter only when it carries every requested
tag: the number of distinct requested names found on the work must equal
the number of distinct requested names.
"""

import logging
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import QueryFailureException
from app.models.associations import work_tags
from app.models.tag import Tag
from app.models.work import Work

logger = logging.getLogger(__name__)


def build_search_query(work_type: str, tags: Sequence[str], user_id: int):
    """
    Build the SELECT for a tag search.

    Args:
        work_type: Required work type
        tags: Requested tag names; duplicates are counted once
        user_id: Owner whose works are searched

    Returns:
        SQLAlchemy Select over Work, newest first
    """
    query = (
        select(Work)
        .where(Work.type == work_type, Work.user_id == user_id)
        .order_by(Work.id.desc())
        .execution_options(populate_existing=True)
    )

    requested = list(dict.fromkeys(tags))
    if requested:
        matching_ids = (
            select(work_tags.c.work_id)
            .join(Tag, Tag.id == work_tags.c.tag_id)
            .where(Tag.name.in_(requested))
            .group_by(work_tags.c.work_id)
            .having(func.count(func.distinct(Tag.name)) == len(requested))
        )
        query = query.where(Work.id.in_(matching_ids))

    return query


class SearchService:
    """Service class for work search."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def search(self, work_type: str, tags: Sequence[str], user_id: int) -> Sequence[Work]:
        """
        Find the caller's works of a type carrying all requested tags.

        Each returned work has its full tag list loaded.

        Raises:
            QueryFailureException: If the storage layer fails
        """
        query = build_search_query(work_type, tags, user_id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Search failed for user {user_id}: {e}")
            raise QueryFailureException(f"Search failed: {e}")

        return result.scalars().all()
