"""
Tag suggestion endpoint.
"""

from fastapi import APIRouter, Query

from app.dependencies import AppSettings, DbSession
from app.services.tag_service import TagService

router = APIRouter()


@router.get("", response_model=list[str])
async def suggest_tags(
    db: DbSession,
    settings: AppSettings,
    q: str | None = Query(default=None, description="Tag name prefix"),
):
    """
    Suggest existing tag names.

    Returns up to ten names starting with ``q`` (case-insensitive),
    in alphabetical order.
    """
    names = await TagService(db).suggest(q, limit=settings.TAG_SUGGESTION_LIMIT)
    return list(names)
