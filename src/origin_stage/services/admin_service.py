"""Site-wide figures for administrators."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from origin_stage.models import Content, User, Vote
from origin_stage.services.vote_service import majority_correct, vote_percentages


@dataclass(frozen=True)
class SiteSummary:
    users: int
    contents: int
    votes: int
    voted_contents: int
    majority_correct_contents: int


def site_summary(db: Session) -> SiteSummary:
    """Count users, content and votes, and how often the crowd guessed right."""
    ai_guesses = func.sum(case((Vote.vote.is_(True), 1), else_=0))
    rows = (
        db.query(Content.is_ai, ai_guesses, func.count(Vote.id))
        .join(Vote, Vote.content_id == Content.id)
        .group_by(Content.id, Content.is_ai)
        .all()
    )

    correct = 0
    for is_ai, ai_votes, total in rows:
        ai_percentage, human_percentage = vote_percentages(int(ai_votes), int(total - ai_votes))
        if majority_correct(ai_percentage, human_percentage, is_ai):
            correct += 1

    return SiteSummary(
        users=db.query(func.count(User.id)).scalar() or 0,
        contents=db.query(func.count(Content.id)).scalar() or 0,
        votes=db.query(func.count(Vote.id)).scalar() or 0,
        voted_contents=len(rows),
        majority_correct_contents=correct,
    )
