# src/origin_stage/models/vote.py
"""Models capturing origin guesses on content."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from origin_stage.core.enums import ANONYMOUS_USER_ID
from origin_stage.db.defaults import new_id, utcnow
from origin_stage.db.session import Base

if TYPE_CHECKING:
    from .content import Content

_IDENTIFIED_VOTER = text(f"user_id != '{ANONYMOUS_USER_ID}'")


class Vote(Base):
    """One guess about a content item's origin.

    ``vote`` is True for "guessed AI" and False for "guessed human". Votes are
    immutable once stored.
    """

    __tablename__ = "votes"
    __table_args__ = (
        Index("ix_votes_content_id", "content_id"),
        # One vote per identified user per content; anonymous rows are exempt.
        Index(
            "uq_votes_content_user",
            "content_id",
            "user_id",
            unique=True,
            sqlite_where=_IDENTIFIED_VOTER,
            postgresql_where=_IDENTIFIED_VOTER,
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    content_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Attribution only; not a foreign key so the anonymous sentinel fits.
    user_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        default=ANONYMOUS_USER_ID,
    )
    vote: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    content: Mapped[Content] = relationship("Content", back_populates="votes")

    @property
    def is_anonymous(self) -> bool:
        return self.user_id == ANONYMOUS_USER_ID
