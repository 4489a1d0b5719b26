"""Database module for the Artwork Catalog API."""

from app.db.base import Base
from app.db.session import Database, commit_or_fail, get_db, resolve_database_url

__all__ = ["Base", "Database", "commit_or_fail", "get_db", "resolve_database_url"]
