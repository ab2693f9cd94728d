# src/origin_stage/services/__init__.py
"""Business logic services for the Origin Stage application."""

from . import admin_service, content_service, user_service, vote_service

__all__ = [
    "admin_service",
    "content_service",
    "user_service",
    "vote_service",
]
