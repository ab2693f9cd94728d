"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from origin_stage.core.access import SessionContext
from origin_stage.core.errors import AuthenticationError, AuthorizationError
from origin_stage.core.security import decode_access_token
from origin_stage.db.session import get_db

# Bearer scheme for JWT authentication; absence is handled by the gate.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_session_context(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> SessionContext | None:
    """Return the caller's resolved session, or ``None`` for anonymous callers.

    The authorization gate stores the session on ``request.state``; when the
    gate did not run (e.g. a router mounted on a bare app) the bearer token is
    decoded here instead.
    """
    if hasattr(request.state, "session"):
        return request.state.session
    if credentials is None:
        return None
    return decode_access_token(credentials.credentials)


OptionalSessionDep = Annotated[SessionContext | None, Depends(get_session_context)]


def require_session(session: OptionalSessionDep) -> SessionContext:
    """Return the session or raise ``AuthenticationError``."""
    if session is None:
        raise AuthenticationError()
    return session


CurrentSessionDep = Annotated[SessionContext, Depends(require_session)]


def require_admin(session: CurrentSessionDep) -> SessionContext:
    """Return an ADMIN session or raise ``AuthorizationError``."""
    if not session.is_admin:
        raise AuthorizationError("Admin access required")
    return session


AdminSessionDep = Annotated[SessionContext, Depends(require_admin)]
