"""Account helpers: registration, credential checks and admin seeding."""
from __future__ import annotations

import logging
import re

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from origin_stage.core import security
from origin_stage.core.enums import Role
from origin_stage.core.errors import AuthenticationError, ConflictError, ValidationError
from origin_stage.models import User

logger = logging.getLogger(__name__)

__all__ = [
    "EMAIL_PATTERN",
    "MIN_PASSWORD_LENGTH",
    "get_user",
    "get_user_by_email",
    "register_user",
    "authenticate",
    "ensure_admin",
]

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user(db: Session, user_id: str) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Return the user registered with ``email`` (case-insensitive)."""
    return db.query(User).filter(func.lower(User.email) == _normalize_email(email)).first()


def register_user(
    db: Session,
    *,
    name: str | None,
    email: str | None,
    password: str | None,
    role: Role = Role.USER,
) -> User:
    """Create an account with a bcrypt-hashed password.

    Raises:
        ValidationError: On a blank name, malformed email or short password.
        ConflictError: If the email is already registered.
    """
    if not name or not name.strip() or not email or not password:
        raise ValidationError("Missing required fields")
    if not EMAIL_PATTERN.match(email.strip()):
        raise ValidationError("Invalid email address")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if get_user_by_email(db, email) is not None:
        raise ConflictError("User already exists")

    user = User(
        name=name.strip(),
        email=_normalize_email(email),
        password_hash=security.hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        # Lost a race with a concurrent registration for the same email.
        db.rollback()
        raise ConflictError("User already exists") from err
    db.refresh(user)
    logger.info("Registered %s account %s", role.value, user.id)
    return user


def authenticate(db: Session, *, email: str | None, password: str | None) -> User:
    """Return the user matching the credentials or raise ``AuthenticationError``."""
    if not email or not password:
        raise ValidationError("Missing required fields")
    user = get_user_by_email(db, email)
    if user is None or not security.verify_password(password, user.password_hash):
        raise AuthenticationError("Invalid email or password")
    return user


def ensure_admin(db: Session, *, name: str, email: str, password: str) -> tuple[User, bool]:
    """Create the administrator account unless it already exists.

    Returns:
        ``(user, created)``.
    """
    existing = get_user_by_email(db, email)
    if existing is not None:
        return existing, False
    return register_user(db, name=name, email=email, password=password, role=Role.ADMIN), True
