# src/origin_stage/models/content.py
"""SQLAlchemy model for submitted content items."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from origin_stage.core.enums import ContentType
from origin_stage.db.defaults import new_id, utcnow
from origin_stage.db.session import Base

if TYPE_CHECKING:
    from .user import User
    from .vote import Vote


class Content(Base):
    """A text, image, music or video item with a ground-truth origin flag.

    ``is_ai`` is the answer voters are trying to guess. ``content`` holds the
    text itself for TEXT items and a URI for the other kinds.
    """

    __tablename__ = "contents"
    __table_args__ = (
        Index("ix_contents_created_at", "created_at"),
        Index("ix_contents_content_type", "content_type"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content_type: Mapped[ContentType] = mapped_column(
        Enum(ContentType, name="content_type"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_ai: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
    )

    user: Mapped[User] = relationship("User", back_populates="contents")
    # Votes are owned by their content; the FK cascade and the service-level
    # delete both remove them.
    votes: Mapped[list[Vote]] = relationship(
        "Vote",
        back_populates="content",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
