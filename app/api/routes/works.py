"""
Work endpoints - registration and deletion.
"""

from fastapi import APIRouter

from app.auth.dependencies import CurrentUser
from app.dependencies import DbSession
from app.schemas.work import SuccessResponse, WorkCreate, WorkCreated
from app.services.work_service import WorkService

router = APIRouter()


@router.post("", status_code=201, response_model=WorkCreated)
async def create_work(body: WorkCreate, db: DbSession, user: CurrentUser):
    """
    Register a work owned by the caller.

    Tags are created on first use and shared between all users.
    """
    work = await WorkService(db).create(body, user_id=user.user_id)
    return WorkCreated(id=work.id)


@router.delete("/{work_id}", response_model=SuccessResponse)
async def delete_work(work_id: int, db: DbSession, user: CurrentUser):
    """
    Delete one of the caller's works.

    Returns 404 both when the work does not exist and when it belongs to
    another user.
    """
    await WorkService(db).delete(work_id, user_id=user.user_id)
    return SuccessResponse()
