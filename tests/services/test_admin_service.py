# tests/services/test_admin_service.py
from origin_stage.services.admin_service import site_summary
from tests.factories import add_votes


def test_site_summary(db_session, test_content, ai_content, admin_user) -> None:
    """Counts rows and scores each voted item's majority against its origin."""
    add_votes(db_session, test_content, ai=1, human=3)  # human, crowd right
    add_votes(db_session, ai_content, ai=1, human=1)  # tie counts as wrong

    summary = site_summary(db_session)

    assert summary.users == 2
    assert summary.contents == 2
    assert summary.votes == 6
    assert summary.voted_contents == 2
    assert summary.majority_correct_contents == 1


def test_site_summary_empty(db_session) -> None:
    summary = site_summary(db_session)
    assert summary.users == 0
    assert summary.voted_contents == 0
    assert summary.majority_correct_contents == 0
