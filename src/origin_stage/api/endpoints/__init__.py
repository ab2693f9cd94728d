# src/origin_stage/api/endpoints/__init__.py
"""API endpoint modules."""

from .admin import router as admin_router
from .auth import router as auth_router
from .contents import router as contents_router
from .votes import router as votes_router

__all__ = [
    "admin_router",
    "auth_router",
    "contents_router",
    "votes_router",
]
