# src/origin_stage/models/user.py
"""SQLAlchemy model for registered accounts."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from origin_stage.core.enums import Role
from origin_stage.db.defaults import new_id, utcnow
from origin_stage.db.session import Base

if TYPE_CHECKING:
    from .content import Content


class User(Base):
    """Account that can submit content and cast identified votes."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role"),
        nullable=False,
        default=Role.USER,
    )
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    contents: Mapped[list[Content]] = relationship("Content", back_populates="user")

    @property
    def is_admin(self) -> bool:
        """Return True when the account carries the ADMIN role."""
        return self.role is Role.ADMIN
