"""
Business logic services for the Artwork Catalog API.
Services handle core operations separate from API endpoints.
"""

from app.services.search_service import SearchService, build_search_query
from app.services.tag_service import TagService
from app.services.user_service import UserService
from app.services.work_service import WorkService

__all__ = [
    "SearchService",
    "TagService",
    "UserService",
    "WorkService",
    "build_search_query",
]
