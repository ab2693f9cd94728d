"""Content-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from origin_stage.core.enums import ContentType

from .common import RequestModel, ResponseModel
from .user import UserSummary
from .vote import VoteSummary


class ContentCreate(RequestModel):
    """Schema for submitting new content.

    ``content_type`` is kept as a raw string; the service validates it against
    ``ContentType`` so an unknown value reports "Invalid content type".
    """

    title: str | None = None
    content_type: str | None = None
    content: str | None = None
    user_id: str | None = None
    is_ai: bool | None = Field(None, alias="isAI")


class ContentUpdate(RequestModel):
    """Partial update; only fields present in the body are applied."""

    title: str | None = None
    content_type: str | None = None
    content: str | None = None
    is_ai: bool | None = Field(None, alias="isAI")


class ContentResponse(ResponseModel):
    """Content returned by create and update."""

    id: str
    title: str
    content_type: ContentType
    content: str
    is_ai: bool = Field(serialization_alias="isAI")
    created_at: datetime
    user_id: str
    user: UserSummary


class ContentListItem(ContentResponse):
    """Content as listed, with its number of votes."""

    vote_count: int = 0


class ContentDetail(ContentResponse):
    """Content with every vote cast on it."""

    votes: list[VoteSummary] = Field(default_factory=list)


class PageMeta(ResponseModel):
    """Pagination metadata for list responses."""

    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class ContentPage(ResponseModel):
    """One page of content."""

    data: list[ContentListItem]
    meta: PageMeta


class AdminSummary(ResponseModel):
    """Site-wide counts for administrators."""

    users: int
    contents: int
    votes: int
    voted_contents: int
    majority_correct_contents: int
