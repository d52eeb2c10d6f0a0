"""Thread and comment schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Thread(BaseModel):
    """Twist thread schema."""

    id: int
    title: str = ""
    content: str = ""
    channel_id: int = 0
    workspace_id: int = 0
    creator: int = 0
    posted_ts: int = 0
    last_updated_ts: int = 0
    comment_count: int = 0
    starred: bool = False
    pinned: bool = False
    archived: bool = False
    participants: list[int] = Field(default_factory=list)


class ThreadUpdate(BaseModel):
    """Fields that can be changed on an existing thread."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    content: str | None = None


class Comment(BaseModel):
    """Thread comment schema."""

    id: int
    content: str = ""
    thread_id: int = 0
    creator: int = 0
    posted_ts: int = 0
    last_updated_ts: int = 0
