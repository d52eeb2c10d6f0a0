"""Reaction schemas."""

from enum import Enum

from pydantic import BaseModel


class ReactionTarget(str, Enum):
    """Object kinds a reaction can be attached to."""

    THREAD = "thread"
    COMMENT = "comment"


class Reaction(BaseModel):
    """Emoji reaction schema."""

    id: int = 0
    emoji: str = ""
    user_id: int = 0
    object_id: int = 0
