"""
Tag SQLAlchemy model.
Tags are shared across all users and created lazily on first use.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Tag(Base):
    """Shared, deduplicated label applicable to any work."""
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Tag name (case-sensitive, unique)",
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name})>"
