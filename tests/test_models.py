# tests/test_models.py
"""Mapping and constraint checks for the ORM models."""

import pytest
from sqlalchemy.exc import IntegrityError

from origin_stage.core.enums import ANONYMOUS_USER_ID, Role
from origin_stage.models import Content, User, Vote
from tests.factories import make_content, make_user


def test_table_names() -> None:
    assert User.__tablename__ == "users"
    assert Content.__tablename__ == "contents"
    assert Vote.__tablename__ == "votes"


def test_defaults_are_applied(db_session, test_user) -> None:
    """Ids, timestamps, role and the origin flag get defaults."""
    item = make_content(db_session, test_user)
    assert test_user.id
    assert test_user.role is Role.USER
    assert test_user.created_at is not None
    assert item.is_ai is False

    vote = Vote(content_id=item.id, vote=True)
    db_session.add(vote)
    db_session.commit()
    assert vote.user_id == ANONYMOUS_USER_ID
    assert vote.is_anonymous


def test_email_is_unique(db_session, test_user) -> None:
    with pytest.raises(IntegrityError):
        make_user(db_session, name="Dup", email=test_user.email)
    db_session.rollback()


def test_identified_vote_unique_per_content(db_session, test_content, other_user) -> None:
    """The partial unique index rejects a second vote from the same user."""
    db_session.add(Vote(content_id=test_content.id, user_id=other_user.id, vote=True))
    db_session.commit()

    db_session.add(Vote(content_id=test_content.id, user_id=other_user.id, vote=False))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_anonymous_votes_are_exempt_from_uniqueness(db_session, test_content) -> None:
    for guess in (True, True, False):
        db_session.add(Vote(content_id=test_content.id, vote=guess))
    db_session.commit()

    assert db_session.query(Vote).filter(Vote.content_id == test_content.id).count() == 3


def test_vote_requires_existing_content(db_session) -> None:
    db_session.add(Vote(content_id="missing", vote=True))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_admin_flag(admin_user, test_user) -> None:
    assert admin_user.is_admin
    assert not test_user.is_admin
