# src/origin_stage/models/__init__.py
"""SQLAlchemy models for the Origin Stage application."""

from .content import Content
from .user import User
from .vote import Vote

__all__ = [
    "Content",
    "User",
    "Vote",
]
