# tests/api/test_votes_api.py
"""Tests for vote-related endpoints."""

from fastapi import status

from origin_stage.core.settings import settings
from tests.factories import add_votes, bearer, make_content, make_user


def test_vote_lifecycle(client, db_session) -> None:
    """Two users vote, a repeat is refused, and the tally reflects both."""
    u1 = make_user(db_session, name="U1", email="u1@example.com")
    u2 = make_user(db_session, name="U2", email="u2@example.com")
    item = make_content(db_session, u1)

    first = client.post(
        "/api/votes",
        json={"contentId": item.id, "userId": u1.id, "vote": True},
        headers=bearer(u1),
    )
    assert first.status_code == status.HTTP_201_CREATED
    assert first.json()["vote"] is True

    second = client.post(
        "/api/votes",
        json={"contentId": item.id, "userId": u2.id, "vote": False},
        headers=bearer(u2),
    )
    assert second.status_code == status.HTTP_201_CREATED
    assert second.json()["vote"] is False

    repeat = client.post(
        "/api/votes",
        json={"contentId": item.id, "userId": u1.id, "vote": False},
        headers=bearer(u1),
    )
    assert repeat.status_code == status.HTTP_409_CONFLICT
    assert repeat.json() == {"error": "User has already voted for this content"}

    tally = client.get("/api/votes", params={"contentId": item.id})
    assert tally.status_code == status.HTTP_200_OK
    assert tally.json() == {
        "contentId": item.id,
        "aiVotes": 1,
        "humanVotes": 1,
        "totalVotes": 2,
    }


def test_session_votes_as_itself(client, test_content, test_user, auth_token) -> None:
    """Omitting userId records the vote under the session's user."""
    response = client.post(
        "/api/votes",
        json={"contentId": test_content.id, "vote": True},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["userId"] == test_user.id


def test_anonymous_votes_are_unlimited(client, test_content) -> None:
    for _ in range(2):
        response = client.post("/api/votes", json={"contentId": test_content.id, "vote": False})
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["userId"] == "anonymous"

    tally = client.get("/api/votes", params={"contentId": test_content.id}).json()
    assert tally["humanVotes"] == 2


def test_anonymous_vote_rejected_when_disabled(client, test_content) -> None:
    settings.allow_anonymous_votes = False

    response = client.post("/api/votes", json={"contentId": test_content.id, "vote": True})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "Authentication required"}


def test_anonymous_caller_cannot_claim_identity(client, test_content, test_user) -> None:
    response = client.post(
        "/api/votes",
        json={"contentId": test_content.id, "userId": test_user.id, "vote": True},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_cannot_vote_as_someone_else(client, test_content, other_user, auth_token) -> None:
    response = client.post(
        "/api/votes",
        json={"contentId": test_content.id, "userId": other_user.id, "vote": True},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"error": "You can only vote as yourself"}


def test_admin_may_vote_for_a_user(client, test_content, other_user, admin_auth_token) -> None:
    response = client.post(
        "/api/votes",
        json={"contentId": test_content.id, "userId": other_user.id, "vote": True},
        headers=admin_auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["userId"] == other_user.id


def test_vote_missing_fields(client, test_content) -> None:
    response = client.post("/api/votes", json={"contentId": test_content.id})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Missing required fields"}


def test_vote_must_be_boolean(client, test_content) -> None:
    response = client.post("/api/votes", json={"contentId": test_content.id, "vote": "yes"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Invalid value for vote"}


def test_vote_on_unknown_content(client) -> None:
    response = client.post("/api/votes", json={"contentId": "missing", "vote": True})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Content not found"}


def test_tally_requires_content_id(client) -> None:
    response = client.get("/api/votes")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Content ID is required"}


def test_tally_unknown_content(client) -> None:
    response = client.get("/api/votes", params={"contentId": "missing"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_vote_results(client, db_session, ai_content) -> None:
    add_votes(db_session, ai_content, ai=1, human=2)

    response = client.get("/api/votes/results", params={"contentId": ai_content.id})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["aiPercentage"] == 33
    assert data["humanPercentage"] == 67
    assert data["isAI"] is True
    assert data["majorityCorrect"] is False
    assert data["totalVotes"] == 3


def test_vote_results_without_votes(client, test_content) -> None:
    data = client.get("/api/votes/results", params={"contentId": test_content.id}).json()
    assert data["aiPercentage"] == 0
    assert data["humanPercentage"] == 0
    assert data["majorityCorrect"] is None


def test_my_vote(client, test_content, auth_token) -> None:
    before = client.get("/api/votes/mine", params={"contentId": test_content.id}, headers=auth_token)
    assert before.status_code == status.HTTP_200_OK
    assert before.json()["voted"] is False

    client.post("/api/votes", json={"contentId": test_content.id, "vote": False}, headers=auth_token)

    after = client.get("/api/votes/mine", params={"contentId": test_content.id}, headers=auth_token)
    assert after.json() == {"contentId": test_content.id, "voted": True, "vote": False}


def test_my_vote_requires_session(client, test_content) -> None:
    response = client.get("/api/votes/mine", params={"contentId": test_content.id})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_admin_vote_for_unknown_user(client, test_content, admin_auth_token) -> None:
    response = client.post(
        "/api/votes",
        json={"contentId": test_content.id, "userId": "no-such-user", "vote": True},
        headers=admin_auth_token,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "User not found"}


def test_admin_cannot_vote_as_anonymous_sentinel(client, test_content, admin_auth_token) -> None:
    """The sentinel cannot be claimed to sidestep the one-vote rule."""
    for _ in range(2):
        response = client.post(
            "/api/votes",
            json={"contentId": test_content.id, "userId": "anonymous", "vote": True},
            headers=admin_auth_token,
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid value for userId"}

    tally = client.get("/api/votes", params={"contentId": test_content.id}).json()
    assert tally["totalVotes"] == 0
