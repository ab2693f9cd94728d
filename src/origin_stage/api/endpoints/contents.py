# src/origin_stage/api/endpoints/contents.py
"""Content-related endpoints for the Origin Stage API."""

from fastapi import APIRouter, Query, status

from origin_stage.api.dependencies import CurrentSessionDep, SessionDep
from origin_stage.core.errors import AuthorizationError
from origin_stage.models import Content
from origin_stage.schemas.common import MessageResponse
from origin_stage.schemas.content import (
    ContentCreate,
    ContentDetail,
    ContentListItem,
    ContentPage,
    ContentResponse,
    ContentUpdate,
    PageMeta,
)
from origin_stage.services import content_service

router = APIRouter(prefix="/contents", tags=["contents"])


@router.get("", response_model=ContentPage)
async def list_contents(
    db: SessionDep,
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
    content_type: str | None = Query(None, alias="contentType"),
) -> ContentPage:
    """List content newest first with optional type filter.

    Args:
        db: Database session
        page: 1-based page number
        limit: Page size (max 100)
        content_type: Optional TEXT/IMAGE/MUSIC/VIDEO filter

    Returns:
        The page of content and its pagination metadata
    """
    result = content_service.list_contents(
        db,
        content_type=content_type,
        page=page,
        limit=limit,
    )
    data = [
        ContentListItem.model_validate(item).model_copy(update={"vote_count": vote_count})
        for item, vote_count in result.items
    ]
    meta = PageMeta(
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
        has_next_page=result.has_next_page,
        has_previous_page=result.has_previous_page,
    )
    return ContentPage(data=data, meta=meta)


@router.get("/{content_id}", response_model=ContentDetail)
async def get_content(content_id: str, db: SessionDep) -> Content:
    """Get a content item with its owner and every vote cast on it."""
    return content_service.get_content(db, content_id.strip(), with_votes=True)


@router.post("", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    content_data: ContentCreate,
    session: CurrentSessionDep,
    db: SessionDep,
) -> Content:
    """Submit a new content item.

    Raises:
        ValidationError: Missing fields or an unknown content type
        AuthorizationError: Creating content on behalf of another user without ADMIN
        NotFoundError: The owning user does not exist
    """
    if (
        content_data.user_id
        and content_data.user_id != session.user_id
        and not session.is_admin
    ):
        raise AuthorizationError("You can only create content for yourself")

    return content_service.create_content(
        db,
        title=content_data.title,
        content_type=content_data.content_type,
        content=content_data.content,
        user_id=content_data.user_id,
        is_ai=content_data.is_ai,
    )


@router.put("/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: str,
    content_data: ContentUpdate,
    session: CurrentSessionDep,
    db: SessionDep,
) -> Content:
    """Apply a partial update (owner or admin)."""
    content_item = content_service.get_content(db, content_id.strip())
    content_service.ensure_can_modify(content_item, session)
    return content_service.update_content(
        db,
        content_item,
        content_data.model_dump(exclude_unset=True),
    )


@router.delete("/{content_id}", response_model=MessageResponse)
async def delete_content(
    content_id: str,
    session: CurrentSessionDep,
    db: SessionDep,
) -> MessageResponse:
    """Delete a content item and its votes (owner or admin)."""
    content_item = content_service.get_content(db, content_id.strip())
    content_service.ensure_can_modify(content_item, session)
    content_service.delete_content(db, content_item)
    return MessageResponse(message="Content deleted successfully")
