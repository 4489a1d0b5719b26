"""
Work service - registration and deletion of works.
"""

import logging

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import QueryFailureException, WorkNotFoundException
from app.db.session import commit_or_fail
from app.models.work import Work
from app.schemas.work import WorkCreate
from app.services.tag_service import TagService

logger = logging.getLogger(__name__)


class WorkService:
    """Service class for work operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: WorkCreate, user_id: int) -> Work:
        """
        Register a work for a user and link its tags.

        Args:
            data: Work creation data
            user_id: Owner of the new work

        Returns:
            Created Work model
        """
        work = Work(
            user_id=user_id,
            pixiv_id=data.pixiv_id,
            title=data.title,
            type=data.type,
        )
        self.db.add(work)

        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to create work for user {user_id}: {e}")
            raise QueryFailureException(f"Failed to create work: {e}")

        await TagService(self.db).attach_to_work(work.id, data.tags)
        await commit_or_fail(self.db, f"work registration for user {user_id}")

        logger.info(f"User {user_id} registered work {work.id} with {len(set(data.tags))} tag(s)")
        return work

    async def delete(self, work_id: int, user_id: int) -> None:
        """
        Delete a work owned by the user.

        Absent works and works owned by someone else are reported the same
        way so callers cannot tell whether it exists.

        Raises:
            WorkNotFoundException: If no owned work with this id exists
        """
        stmt = (
            delete(Work)
            .where(Work.id == work_id, Work.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete work {work_id}: {e}")
            raise QueryFailureException(f"Failed to delete work: {e}")

        if result.rowcount == 0:
            raise WorkNotFoundException(work_id)

        await commit_or_fail(self.db, f"deletion of work {work_id}")

        logger.info(f"User {user_id} deleted work {work_id}")
