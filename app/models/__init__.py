"""
SQLAlchemy ORM models for the Artwork Catalog API.
"""

from app.models.user import User
from app.models.work import Work
from app.models.tag import Tag
from app.models.associations import work_tags

__all__ = [
    "User",
    "Work",
    "Tag",
    "work_tags",
]
