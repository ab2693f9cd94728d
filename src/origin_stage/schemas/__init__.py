# src/origin_stage/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .common import ErrorResponse, MessageResponse
from .content import (
    AdminSummary,
    ContentCreate,
    ContentDetail,
    ContentListItem,
    ContentPage,
    ContentResponse,
    ContentUpdate,
    PageMeta,
)
from .user import LoginRequest, RegisterRequest, TokenResponse, UserResponse, UserSummary
from .vote import (
    MyVoteResponse,
    VoteCreate,
    VoteResponse,
    VoteResultsResponse,
    VoteSummary,
    VoteTallyResponse,
)

__all__ = [
    "ErrorResponse", "MessageResponse",
    "AdminSummary", "ContentCreate", "ContentDetail", "ContentListItem",
    "ContentPage", "ContentResponse", "ContentUpdate", "PageMeta",
    "LoginRequest", "RegisterRequest", "TokenResponse", "UserResponse", "UserSummary",
    "MyVoteResponse", "VoteCreate", "VoteResponse", "VoteResultsResponse",
    "VoteSummary", "VoteTallyResponse",
]
