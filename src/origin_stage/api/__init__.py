# src/origin_stage/api/__init__.py
"""HTTP API routers, dependencies and middleware."""

from .endpoints import admin_router, auth_router, contents_router, votes_router

__all__ = [
    "admin_router",
    "auth_router",
    "contents_router",
    "votes_router",
]
