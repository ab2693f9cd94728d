"""Typed application errors mapped to HTTP status codes at the request boundary."""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for errors rendered as ``{"error": message}`` responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class AuthenticationError(AppError):
    """No usable session on a route that requires one."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class AuthorizationError(AppError):
    """The caller is authenticated but not allowed to perform the action."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """The write would violate a uniqueness rule."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class StoreError(AppError):
    """The persistence layer failed; details stay in the server log."""


__all__ = [
    "AppError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
]
