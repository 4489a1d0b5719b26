"""
Work search endpoint.
"""

from fastapi import APIRouter

from app.auth.dependencies import CurrentUser
from app.dependencies import DbSession
from app.models.work import Work
from app.schemas.work import WorkResponse, WorkSearch
from app.services.search_service import SearchService

router = APIRouter()


def _work_to_response(work: Work) -> WorkResponse:
    """Convert Work model to response schema."""
    return WorkResponse(
        id=work.id,
        pixivId=work.pixiv_id,
        title=work.title,
        type=work.type,
        tags=[tag.name for tag in work.tags],
    )


@router.post("", response_model=list[WorkResponse])
async def search_works(body: WorkSearch, db: DbSession, user: CurrentUser):
    """
    Search the caller's works of a type.

    With an empty tag list every work of the type is returned. Otherwise a
    work must carry all of the requested tags. Newest works come first.
    """
    works = await SearchService(db).search(body.type, body.tags, user_id=user.user_id)
    return [_work_to_response(work) for work in works]
