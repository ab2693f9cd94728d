"""Authorization gate applied to every inbound request."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from origin_stage.core.access import GateAction, SessionContext, classify_request
from origin_stage.core.security import decode_access_token
from origin_stage.core.settings import settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def resolve_session(authorization: str | None) -> SessionContext | None:
    """Turn an ``Authorization`` header into a session, if it holds a valid token."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        return None
    return decode_access_token(token)


async def authorization_gate(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Resolve the caller, classify the request and short-circuit if it is gated."""
    session = resolve_session(request.headers.get("Authorization"))
    request.state.session = session

    decision = classify_request(
        request.url.path,
        request.method,
        session,
        allow_anonymous_votes=settings.allow_anonymous_votes,
    )
    if decision.action is GateAction.REDIRECT:
        return RedirectResponse(decision.location or "/", status_code=decision.status_code)
    if decision.action is GateAction.REJECT:
        logger.debug(
            "Gate rejected %s %s with %d", request.method, request.url.path, decision.status_code
        )
        return JSONResponse({"error": decision.error}, status_code=decision.status_code)
    return await call_next(request)
