"""
Health endpoint.
No authentication required.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.dependencies import DbSession

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: DbSession):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", "database": <dialect>} when service is healthy
        {"status": "degraded", "issues": [...]} when the database is unreachable
    """
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Health check failed: {e}")
        return {
            "status": "degraded",
            "issues": [f"Database: {str(e)}"],
        }

    return {
        "status": "ok",
        "database": db.get_bind().dialect.name,
    }
