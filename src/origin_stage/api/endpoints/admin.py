# src/origin_stage/api/endpoints/admin.py
"""Administrator-only endpoints."""

from fastapi import APIRouter

from origin_stage.api.dependencies import AdminSessionDep, SessionDep
from origin_stage.schemas.content import AdminSummary
from origin_stage.services import admin_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/summary", response_model=AdminSummary)
async def get_summary(db: SessionDep, _admin: AdminSessionDep) -> AdminSummary:
    """Return site-wide counts and how often the crowd guessed right."""
    return AdminSummary.model_validate(admin_service.site_summary(db))
