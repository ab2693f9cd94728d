# src/origin_stage/api/endpoints/votes.py
"""Vote-related endpoints for the Origin Stage API."""

from fastapi import APIRouter, Query, status

from origin_stage.api.dependencies import CurrentSessionDep, OptionalSessionDep, SessionDep
from origin_stage.core.access import SessionContext
from origin_stage.core.errors import AuthenticationError, AuthorizationError
from origin_stage.core.settings import settings
from origin_stage.models import Vote
from origin_stage.schemas.vote import (
    MyVoteResponse,
    VoteCreate,
    VoteResponse,
    VoteResultsResponse,
    VoteTallyResponse,
)
from origin_stage.services import vote_service

router = APIRouter(prefix="/votes", tags=["votes"])


def _resolve_voter(requested_user_id: str | None, session: SessionContext | None) -> str | None:
    """Return the identity to record the vote under, ``None`` meaning anonymous.

    A session always votes as itself (admins may vote on behalf of a user).
    Without a session an identity cannot be claimed.
    """
    if session is None:
        if requested_user_id:
            raise AuthenticationError("Authentication required to vote as a user")
        if not settings.allow_anonymous_votes:
            raise AuthenticationError()
        return None

    if requested_user_id and requested_user_id != session.user_id and not session.is_admin:
        raise AuthorizationError("You can only vote as yourself")
    return requested_user_id or session.user_id


@router.get("", response_model=VoteTallyResponse)
async def get_vote_tally(
    db: SessionDep,
    content_id: str | None = Query(None, alias="contentId"),
) -> VoteTallyResponse:
    """Return AI and human guess counts for a content item."""
    tally = vote_service.tally_votes(db, content_id)
    return VoteTallyResponse.model_validate(tally)


@router.get("/results", response_model=VoteResultsResponse)
async def get_vote_results(
    db: SessionDep,
    content_id: str | None = Query(None, alias="contentId"),
) -> VoteResultsResponse:
    """Return the tally with display percentages and the true origin."""
    results = vote_service.vote_results(db, content_id)
    return VoteResultsResponse.model_validate(results)


@router.get("/mine", response_model=MyVoteResponse)
async def get_my_vote(
    db: SessionDep,
    session: CurrentSessionDep,
    content_id: str | None = Query(None, alias="contentId"),
) -> MyVoteResponse:
    """Get the current user's vote on a specific content item."""
    vote = vote_service.get_user_vote(db, content_id, session.user_id)
    if vote is None:
        return MyVoteResponse(content_id=content_id, voted=False)
    return MyVoteResponse(content_id=vote.content_id, voted=True, vote=vote.vote)


@router.post("", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
async def cast_vote(
    vote_data: VoteCreate,
    db: SessionDep,
    session: OptionalSessionDep,
) -> Vote:
    """Record one guess about a content item's origin."""
    voter_id = _resolve_voter(vote_data.user_id, session)
    return vote_service.record_vote(
        db,
        content_id=vote_data.content_id,
        user_id=voter_id,
        vote=vote_data.vote,
    )
