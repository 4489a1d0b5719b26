"""
Association tables for many-to-many relationships.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from app.db.base import Base

# Work-Tag many-to-many association table
work_tags = Table(
    "work_tags",
    Base.metadata,
    Column(
        "work_id",
        Integer,
        ForeignKey("works.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
