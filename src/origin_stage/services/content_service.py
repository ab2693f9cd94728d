"""CRUD-style helpers for content items."""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from origin_stage.core.access import SessionContext
from origin_stage.core.enums import ContentType
from origin_stage.core.errors import AuthorizationError, NotFoundError, ValidationError
from origin_stage.models import Content, User, Vote

logger = logging.getLogger(__name__)

__all__ = [
    "ContentPageResult",
    "parse_content_type",
    "get_content",
    "create_content",
    "update_content",
    "delete_content",
    "list_contents",
    "ensure_can_modify",
]

UPDATABLE_FIELDS = ("title", "content", "is_ai", "content_type")
# Wire names, matching the request schema aliases.
FIELD_LABELS = {
    "title": "title",
    "content": "content",
    "is_ai": "isAI",
    "content_type": "contentType",
}


@dataclass(frozen=True)
class ContentPageResult:
    """One page of content with per-item vote counts."""

    items: Sequence[tuple[Content, int]]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


def parse_content_type(value: str | ContentType) -> ContentType:
    """Return the enum member for ``value`` or raise ``ValidationError``."""
    try:
        return ContentType(value)
    except ValueError as err:
        raise ValidationError("Invalid content type") from err


def get_content(db: Session, content_id: str | None, *, with_votes: bool = False) -> Content:
    """Return a content item or raise ``NotFoundError``."""
    if not content_id:
        raise ValidationError("Content ID is required")
    query = db.query(Content).options(selectinload(Content.user))
    if with_votes:
        query = query.options(selectinload(Content.votes))
    content = query.filter(Content.id == content_id).first()
    if content is None:
        raise NotFoundError("Content not found")
    return content


def ensure_can_modify(content: Content, session: SessionContext) -> None:
    """Allow the owner or an administrator; reject everyone else."""
    if session.is_admin or content.user_id == session.user_id:
        return
    raise AuthorizationError("You can only modify your own content")


def create_content(
    db: Session,
    *,
    title: str | None,
    content_type: str | None,
    content: str | None,
    user_id: str | None,
    is_ai: bool | None = None,
) -> Content:
    """Persist a new content item owned by ``user_id``.

    Raises:
        ValidationError: If a required field is missing or the type is unknown.
        NotFoundError: If the owning user does not exist.
    """
    if not title or not content_type or not content or not user_id:
        raise ValidationError("Missing required fields")
    parsed_type = parse_content_type(content_type)

    if db.get(User, user_id) is None:
        raise NotFoundError("User not found")

    new_content = Content(
        title=title,
        content_type=parsed_type,
        content=content,
        is_ai=bool(is_ai),
        user_id=user_id,
    )
    db.add(new_content)
    db.commit()
    db.refresh(new_content)
    logger.info("Created %s content %s for user %s", parsed_type.value, new_content.id, user_id)
    return new_content


def update_content(db: Session, content_item: Content, changes: Mapping[str, Any]) -> Content:
    """Apply a partial update; keys absent from ``changes`` are left alone."""
    for key, value in changes.items():
        if key not in UPDATABLE_FIELDS:
            continue
        if key == "content_type":
            value = parse_content_type(value)
        elif value is None or (key in ("title", "content") and not value):
            raise ValidationError(f"Invalid value for {FIELD_LABELS[key]}")
        setattr(content_item, key, value)

    db.add(content_item)
    db.commit()
    db.refresh(content_item)
    return content_item


def delete_content(db: Session, content_item: Content) -> None:
    """Delete a content item and every vote on it in one transaction."""
    content_id = content_item.id
    votes = list(content_item.votes)
    for vote in votes:
        db.delete(vote)
    db.delete(content_item)
    db.commit()
    logger.info("Deleted content %s with %d vote(s)", content_id, len(votes))


def list_contents(
    db: Session,
    *,
    content_type: str | None = None,
    page: int = 1,
    limit: int = 10,
) -> ContentPageResult:
    """Return a page of content, newest first, optionally filtered by type."""
    if page < 1 or limit < 1:
        raise ValidationError("Invalid pagination parameters")

    query = db.query(Content)
    if content_type:
        query = query.filter(Content.content_type == parse_content_type(content_type))

    total = query.count()

    vote_counts = (
        db.query(Vote.content_id, func.count(Vote.id).label("vote_count"))
        .group_by(Vote.content_id)
        .subquery()
    )
    rows = (
        query.outerjoin(vote_counts, vote_counts.c.content_id == Content.id)
        .add_columns(func.coalesce(vote_counts.c.vote_count, 0))
        .options(selectinload(Content.user))
        .order_by(Content.created_at.desc(), Content.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    items = [(content_item, int(count)) for content_item, count in rows]
    return ContentPageResult(items=items, total=total, page=page, limit=limit)
