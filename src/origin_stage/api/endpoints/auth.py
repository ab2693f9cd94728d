# src/origin_stage/api/endpoints/auth.py
"""Registration and login endpoints for the Origin Stage API."""

from fastapi import APIRouter, status

from origin_stage.api.dependencies import SessionDep
from origin_stage.core.security import create_access_token
from origin_stage.models import User
from origin_stage.schemas.user import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from origin_stage.services import user_service

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: SessionDep) -> User:
    """Create a USER account."""
    return user_service.register_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )


@router.post("/login", response_model=TokenResponse)
async def login(payload: LoginRequest, db: SessionDep) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    user = user_service.authenticate(db, email=payload.email, password=payload.password)
    return TokenResponse(
        access_token=create_access_token(user.id, user.role),
        user=UserResponse.model_validate(user),
    )
