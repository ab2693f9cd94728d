"""Closed enumerations shared by models, schemas and the access gate."""

from enum import Enum


class Role(str, Enum):
    """Account role."""

    USER = "USER"
    ADMIN = "ADMIN"


class ContentType(str, Enum):
    """Kind of payload carried by a content item."""

    TEXT = "TEXT"
    IMAGE = "IMAGE"
    MUSIC = "MUSIC"
    VIDEO = "VIDEO"


# Stored in Vote.user_id when the voter has no identity.
ANONYMOUS_USER_ID = "anonymous"
