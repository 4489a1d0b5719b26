"""
Work SQLAlchemy model.
A Work is one cataloged artwork owned by exactly one user.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.tag import Tag


class Work(Base):
    """Cataloged artwork record."""
    __tablename__ = "works"

    # Ids only grow, so descending id means most recently registered first
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning user",
    )
    pixiv_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Identifier of the artwork on the source site",
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Free-form classification (illustration, novel, ...)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # ===================
    # Relationships
    # ===================
    tags: Mapped[list["Tag"]] = relationship(
        "Tag",
        secondary="work_tags",
        lazy="selectin",
        order_by="Tag.name",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Work(id={self.id}, title={self.title}, type={self.type})>"
