"""Direct message schemas."""

from pydantic import BaseModel, Field


class Conversation(BaseModel):
    """Conversation between a set of users."""

    id: int
    user_ids: list[int] = Field(default_factory=list)
    message_count: int = 0
    created_ts: int = 0
    is_archived: bool = False
    is_muted: bool = False


class ConversationMessage(BaseModel):
    """Message posted in a conversation."""

    id: int
    conversation_id: int = 0
    content: str = ""
    user_id: int = 0
    created_ts: int = 0
