"""Recording and aggregating origin guesses."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from origin_stage.core.enums import ANONYMOUS_USER_ID
from origin_stage.core.errors import ConflictError, NotFoundError, ValidationError
from origin_stage.models import Content, User, Vote

logger = logging.getLogger(__name__)

__all__ = [
    "VoteTally",
    "VoteResults",
    "record_vote",
    "tally_votes",
    "vote_percentages",
    "majority_correct",
    "vote_results",
    "get_user_vote",
]


@dataclass(frozen=True)
class VoteTally:
    """Counts of AI and human guesses for one content item."""

    content_id: str
    ai_votes: int
    human_votes: int

    @property
    def total_votes(self) -> int:
        return self.ai_votes + self.human_votes


@dataclass(frozen=True)
class VoteResults:
    """Tally plus display percentages and the ground-truth reveal."""

    tally: VoteTally
    ai_percentage: int
    human_percentage: int
    is_ai: bool
    majority_correct: bool | None

    @property
    def content_id(self) -> str:
        return self.tally.content_id

    @property
    def ai_votes(self) -> int:
        return self.tally.ai_votes

    @property
    def human_votes(self) -> int:
        return self.tally.human_votes

    @property
    def total_votes(self) -> int:
        return self.tally.total_votes


def _require_content(db: Session, content_id: str | None) -> Content:
    if not content_id:
        raise ValidationError("Content ID is required")
    content = db.get(Content, content_id)
    if content is None:
        raise NotFoundError("Content not found")
    return content


def _require_voter(db: Session, user_id: str) -> None:
    # The sentinel is reserved for votes without an identity.
    if user_id == ANONYMOUS_USER_ID:
        raise ValidationError("Invalid value for userId")
    if db.get(User, user_id) is None:
        raise NotFoundError("User not found")


def record_vote(
    db: Session,
    *,
    content_id: str | None,
    user_id: str | None,
    vote: bool | None,
) -> Vote:
    """Persist a single vote.

    Args:
        db: Database session.
        content_id: Content being judged.
        user_id: Identified voter, or ``None`` for an anonymous vote.
        vote: True for "AI", False for "human". ``False`` is a valid value.

    Returns:
        The stored vote.

    Raises:
        ValidationError: If ``content_id`` or ``vote`` is missing, or ``user_id``
            is the anonymous sentinel.
        NotFoundError: If the content or the identified user does not exist.
        ConflictError: If the identified user already voted on this content.
    """
    if not content_id or vote is None:
        raise ValidationError("Missing required fields")

    _require_content(db, content_id)
    if user_id:
        _require_voter(db, user_id)

    voter = user_id or ANONYMOUS_USER_ID
    new_vote = Vote(content_id=content_id, user_id=voter, vote=vote)

    # The partial unique index on (content_id, user_id) is the duplicate check;
    # anonymous rows are outside it.
    try:
        with db.begin_nested():
            db.add(new_vote)
            db.flush()
    except IntegrityError as err:
        logger.info("Duplicate vote rejected for content %s by user %s", content_id, voter)
        raise ConflictError("User has already voted for this content") from err

    db.commit()
    db.refresh(new_vote)
    logger.info(
        "Recorded %s vote on content %s (%s)",
        "AI" if vote else "human",
        content_id,
        "anonymous" if voter == ANONYMOUS_USER_ID else f"user {voter}",
    )
    return new_vote


def _count_votes(db: Session, content_id: str, guessed_ai: bool) -> int:
    return db.query(func.count(Vote.id)).filter(
        Vote.content_id == content_id,
        Vote.vote.is_(guessed_ai),
    ).scalar() or 0


def _tally_for(db: Session, content: Content) -> VoteTally:
    return VoteTally(
        content_id=content.id,
        ai_votes=_count_votes(db, content.id, True),
        human_votes=_count_votes(db, content.id, False),
    )


def tally_votes(db: Session, content_id: str | None) -> VoteTally:
    """Count AI and human guesses for a content item.

    Raises:
        ValidationError: If ``content_id`` is missing.
        NotFoundError: If the content does not exist.
    """
    return _tally_for(db, _require_content(db, content_id))


def vote_percentages(ai_votes: int, human_votes: int) -> tuple[int, int]:
    """Return ``(ai_percentage, human_percentage)`` for display.

    The AI share is rounded half-up and the human share is its complement, so
    the pair always sums to 100 when there are votes and is ``(0, 0)`` when
    there are none.
    """
    total = ai_votes + human_votes
    if total <= 0:
        return 0, 0
    ai_share = (Decimal(ai_votes) * 100 / Decimal(total)).quantize(
        Decimal("1"),
        rounding=ROUND_HALF_UP,
    )
    ai_percentage = int(ai_share)
    return ai_percentage, 100 - ai_percentage


def majority_correct(ai_percentage: int, human_percentage: int, is_ai: bool) -> bool | None:
    """Return whether the strict majority guessed the true origin.

    ``None`` when nobody has voted. An exact 50/50 split counts as incorrect.
    """
    if ai_percentage == 0 and human_percentage == 0:
        return None
    if is_ai:
        return ai_percentage > 50
    return human_percentage > 50


def vote_results(db: Session, content_id: str | None) -> VoteResults:
    """Build the tally, percentages and reveal for a content item."""
    content = _require_content(db, content_id)
    tally = _tally_for(db, content)
    ai_percentage, human_percentage = vote_percentages(tally.ai_votes, tally.human_votes)
    return VoteResults(
        tally=tally,
        ai_percentage=ai_percentage,
        human_percentage=human_percentage,
        is_ai=content.is_ai,
        majority_correct=majority_correct(ai_percentage, human_percentage, content.is_ai),
    )


def get_user_vote(db: Session, content_id: str | None, user_id: str) -> Vote | None:
    """Return the identified user's vote on a content item, if any."""
    _require_content(db, content_id)
    return db.query(Vote).filter(
        Vote.content_id == content_id,
        Vote.user_id == user_id,
    ).first()
