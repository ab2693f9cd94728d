"""Request classification for the authorization gate.

Every inbound request is classified from its path, method and the resolved
session before it reaches an endpoint. Rules are evaluated in order and the
first match wins:

1. exact public paths (home, login, register, registration API)
2. content detail pages (anything under ``/content/`` except creation)
3. read-only requests to the content and vote APIs
4. anonymous vote submission, when enabled
5. auth-required paths without a session: redirect pages to ``/login``,
   reject API calls with 401
6. admin paths without an ADMIN session: redirect pages to ``/``, reject API
   calls with 401/403
7. everything else passes through

The public rules must short-circuit before the auth-required check, otherwise
anonymous content viewing breaks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NoReturn

from fastapi import status

from origin_stage.core.enums import Role

PUBLIC_PATHS = frozenset({"/", "/login", "/register", "/api/register"})
CONTENT_PAGE_PREFIX = "/content"
CONTENT_CREATE_SEGMENT = "create"
PUBLIC_READ_PREFIXES = ("/api/contents", "/api/votes")
READ_METHODS = frozenset({"GET", "HEAD"})
VOTE_API_PATH = "/api/votes"
AUTH_REQUIRED_PREFIXES = ("/content/create", "/api/contents", "/api/votes")
ADMIN_PREFIXES = ("/admin", "/api/admin")
API_PREFIX = "/api"

LOGIN_PAGE = "/login"
HOME_PAGE = "/"


@dataclass(frozen=True)
class SessionContext:
    """Identity resolved for the current request."""

    user_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return is_admin_role(self.role)


class GateAction(str, Enum):
    ALLOW = "allow"
    REDIRECT = "redirect"
    REJECT = "reject"


@dataclass(frozen=True)
class GateDecision:
    """Outcome of classifying one request."""

    action: GateAction
    status_code: int = status.HTTP_200_OK
    location: str | None = None
    error: str | None = None

    @property
    def allowed(self) -> bool:
        return self.action is GateAction.ALLOW


ALLOW = GateDecision(GateAction.ALLOW)


def _assert_never(value: NoReturn) -> NoReturn:
    raise AssertionError(f"Unhandled role: {value!r}")


def is_admin_role(role: Role) -> bool:
    """Return True for ADMIN, False for USER; any other value is a bug."""
    if role is Role.ADMIN:
        return True
    if role is Role.USER:
        return False
    _assert_never(role)


def matches_prefix(path: str, prefix: str) -> bool:
    """Return True when ``path`` is ``prefix`` or lies below it segment-wise."""
    return path == prefix or path.startswith(prefix + "/")


def _matches_any(path: str, prefixes: tuple[str, ...]) -> bool:
    return any(matches_prefix(path, prefix) for prefix in prefixes)


def _is_api(path: str) -> bool:
    return matches_prefix(path, API_PREFIX)


def _is_content_page(path: str) -> bool:
    if not path.startswith(CONTENT_PAGE_PREFIX + "/"):
        return False
    segments = path[len(CONTENT_PAGE_PREFIX) + 1:].split("/")
    return CONTENT_CREATE_SEGMENT not in segments


def _redirect(location: str) -> GateDecision:
    return GateDecision(
        GateAction.REDIRECT,
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        location=location,
    )


def _reject(status_code: int, error: str) -> GateDecision:
    return GateDecision(GateAction.REJECT, status_code=status_code, error=error)


def normalize_path(path: str) -> str:
    """Strip a trailing slash so ``/api/votes/`` and ``/api/votes`` classify alike."""
    if len(path) > 1 and path.endswith("/"):
        return path.rstrip("/") or "/"
    return path or "/"


def classify_request(
    path: str,
    method: str,
    session: SessionContext | None,
    *,
    allow_anonymous_votes: bool = True,
) -> GateDecision:
    """Decide whether a request may proceed.

    Args:
        path: Request path without query string.
        method: HTTP method.
        session: Resolved caller identity, or ``None`` for anonymous callers.
        allow_anonymous_votes: Whether ``POST /api/votes`` is open to anonymous callers.

    Returns:
        The gate decision; only ``ALLOW`` lets the request reach an endpoint.
    """
    path = normalize_path(path)
    method = method.upper()

    if path in PUBLIC_PATHS:
        return ALLOW

    if _is_content_page(path):
        return ALLOW

    if method in READ_METHODS and _matches_any(path, PUBLIC_READ_PREFIXES):
        return ALLOW

    if session is None and allow_anonymous_votes and method == "POST" and path == VOTE_API_PATH:
        return ALLOW

    if session is None and _matches_any(path, AUTH_REQUIRED_PREFIXES):
        if _is_api(path):
            return _reject(status.HTTP_401_UNAUTHORIZED, "Authentication required")
        return _redirect(LOGIN_PAGE)

    if _matches_any(path, ADMIN_PREFIXES) and not (session is not None and session.is_admin):
        if not _is_api(path):
            return _redirect(HOME_PAGE)
        if session is None:
            return _reject(status.HTTP_401_UNAUTHORIZED, "Authentication required")
        return _reject(status.HTTP_403_FORBIDDEN, "Admin access required")

    return ALLOW


__all__ = [
    "SessionContext",
    "GateAction",
    "GateDecision",
    "classify_request",
    "is_admin_role",
    "matches_prefix",
    "normalize_path",
]
