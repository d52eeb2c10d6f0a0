"""Workspace and workspace user schemas."""

from pydantic import BaseModel


class Workspace(BaseModel):
    """Twist workspace schema."""

    id: int
    name: str = ""
    creator: int = 0
    created_ts: int = 0
    plan: str = ""


class User(BaseModel):
    """Workspace member schema."""

    id: int
    name: str = ""
    email: str = ""
    user_type: str = ""
    bot: bool = False
    removed: bool = False
