"""Attachment schemas."""

from enum import Enum

from pydantic import BaseModel


class AttachmentTarget(str, Enum):
    """Object kinds a file can be attached to."""

    THREAD = "thread"
    COMMENT = "comment"
    CONVERSATION = "conversation"

    @property
    def field_name(self) -> str:
        """Form field / query parameter naming the target object."""
        return f"{self.value}_id"


class Attachment(BaseModel):
    """Uploaded file schema."""

    id: int = 0
    title: str = ""
    url: str = ""
    size: int = 0
    mime_type: str = ""
    uploaded_ts: int = 0
