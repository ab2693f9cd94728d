"""Exception handlers rendering every failure as ``{"error": message}``."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from origin_stage.core.errors import AppError, StoreError

logger = logging.getLogger(__name__)

CONTENT_TYPE_FIELDS = {"contentType", "content_type"}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def validation_message(exc: RequestValidationError) -> str:
    """Summarize pydantic errors as a single human-readable message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    error_type = first.get("type", "")
    loc = [part for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    if error_type == "missing":
        return "Missing required fields"
    if error_type == "json_invalid":
        return "Invalid JSON body"
    if not loc:
        return "Invalid request body"
    field = str(loc[-1])
    if field in CONTENT_TYPE_FIELDS:
        return "Invalid content type"
    return f"Invalid value for {field}"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    error = StoreError()
    return _error_response(error.status_code, error.message)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything else as a generic 500; the traceback goes to the log only."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = StoreError()
    return _error_response(error.status_code, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
