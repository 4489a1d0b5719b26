"""
API Router - Aggregates all endpoints.
Base Path: /api
"""

from fastapi import APIRouter

from app.api.routes import auth, health, search, tags, works
from app.schemas.error import ErrorResponse, ValidationErrorResponse

# Documented error shapes
_COMMON_ERRORS = {
    400: {"model": ValidationErrorResponse},
    500: {"model": ErrorResponse},
}
_AUTHENTICATED_ERRORS = {
    **_COMMON_ERRORS,
    401: {"model": ErrorResponse},
}

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, tags=["auth"], responses=_AUTHENTICATED_ERRORS)
api_router.include_router(
    works.router,
    prefix="/works",
    tags=["works"],
    responses={**_AUTHENTICATED_ERRORS, 404: {"model": ErrorResponse}},
)
api_router.include_router(search.router, prefix="/search", tags=["works"], responses=_AUTHENTICATED_ERRORS)
api_router.include_router(tags.router, prefix="/tags", tags=["tags"], responses=_COMMON_ERRORS)
