# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ALLOW_ANONYMOUS_VOTES", "true")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from origin_stage.core.enums import ContentType, Role
from origin_stage.core.settings import settings
from origin_stage.db.session import Base
from origin_stage.db.session import get_db as app_get_session
from origin_stage.main import app as fastapi_app
from origin_stage.models import Content, User
from tests.factories import bearer, make_content, make_user

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture(autouse=True)
def restore_vote_policy() -> Iterator[None]:
    """Tests may toggle anonymous voting; put the configured value back."""
    original = settings.allow_anonymous_votes
    try:
        yield
    finally:
        settings.allow_anonymous_votes = original


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test", follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return a persisted USER account."""
    return make_user(db_session, name="Test User", email="test@example.com")


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second persisted USER account."""
    return make_user(db_session, name="Other User", email="other@example.com")


@pytest.fixture()
def admin_user(db_session: Session) -> User:
    """Create and return a persisted ADMIN account."""
    return make_user(db_session, name="Administrator", email="admin@example.com", role=Role.ADMIN)


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return bearer(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return bearer(other_user)


@pytest.fixture()
def admin_auth_token(admin_user: User) -> dict[str, str]:
    """Return authorization headers for the administrator."""
    return bearer(admin_user)


@pytest.fixture()
def test_content(db_session: Session, test_user: User) -> Content:
    """Create a baseline human-made TEXT item owned by the test user."""
    return make_content(db_session, test_user)


@pytest.fixture()
def ai_content(db_session: Session, test_user: User) -> Content:
    """Create an AI-generated IMAGE item owned by the test user."""
    return make_content(
        db_session,
        test_user,
        title="Generated",
        content_type=ContentType.IMAGE,
        content="https://example.com/generated.png",
        is_ai=True,
    )
