# src/origin_stage/main.py
"""Main entry point for the Origin Stage application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from origin_stage.api import admin_router, auth_router, contents_router, votes_router
from origin_stage.api.errors import register_exception_handlers
from origin_stage.api.middleware import authorization_gate
from origin_stage.core.logging import configure_logging
from origin_stage.core.settings import settings

configure_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Origin Stage API",
    description="Guess whether content was made by an AI or a human",
    version=settings.app_version,
)

register_exception_handlers(app)

# The gate is registered first so CORS (outermost) answers preflight requests.
app.middleware("http")(authorization_gate)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router, prefix="/api")
app.include_router(contents_router, prefix="/api")
app.include_router(votes_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Guess whether content was made by an AI or a human",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("origin_stage.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
