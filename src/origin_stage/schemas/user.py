"""Account-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from origin_stage.core.enums import Role

from .common import RequestModel, ResponseModel


class RegisterRequest(RequestModel):
    """Schema for account registration.

    Fields are optional at the schema level so the service can report
    missing and malformed values with specific messages.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(RequestModel):
    """Credentials exchanged for an access token."""

    email: str | None = None
    password: str | None = None


class UserSummary(ResponseModel):
    """Public owner information embedded in content responses."""

    id: str
    name: str
    image: str | None = None


class UserResponse(UserSummary):
    """Account details returned to the account holder."""

    email: str
    role: Role
    created_at: datetime


class TokenResponse(ResponseModel):
    """Access token issued on login."""

    access_token: str
    token_type: str = Field(default="bearer")
    user: UserResponse
