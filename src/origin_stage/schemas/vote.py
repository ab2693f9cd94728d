"""Vote-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field, StrictBool

from .common import RequestModel, ResponseModel


class VoteCreate(RequestModel):
    """Schema for casting a vote.

    ``vote`` is True for "AI" and False for "human". It must be a JSON
    boolean; ``false`` is a valid vote, only an absent value is rejected.
    """

    content_id: str | None = None
    user_id: str | None = None
    vote: StrictBool | None = Field(None, description="true = AI, false = human")


class VoteResponse(ResponseModel):
    """A stored vote."""

    id: str
    content_id: str
    user_id: str
    vote: bool
    created_at: datetime


class VoteSummary(ResponseModel):
    """Vote as embedded in content detail responses."""

    id: str
    vote: bool
    user_id: str


class VoteTallyResponse(ResponseModel):
    """Aggregated guesses for one content item."""

    content_id: str
    ai_votes: int
    human_votes: int
    total_votes: int


class VoteResultsResponse(VoteTallyResponse):
    """Tally with display percentages and the ground-truth reveal."""

    ai_percentage: int
    human_percentage: int
    is_ai: bool = Field(serialization_alias="isAI")
    majority_correct: bool | None


class MyVoteResponse(ResponseModel):
    """The caller's own vote on a content item, if any."""

    content_id: str
    voted: bool
    vote: bool | None = None
