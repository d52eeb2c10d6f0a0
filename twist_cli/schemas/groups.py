"""User group schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Group(BaseModel):
    """Twist user group schema."""

    id: int
    name: str = ""
    description: str = ""
    workspace_id: int = 0
    user_ids: list[int] = Field(default_factory=list)
    created_ts: int = 0


class GroupOptions(BaseModel):
    """Optional fields accepted when creating a group."""

    model_config = ConfigDict(extra="forbid")

    description: str | None = None
    user_ids: list[int] | None = None


class GroupUpdate(BaseModel):
    """Fields that can be changed on an existing group."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
