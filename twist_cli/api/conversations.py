"""Direct message endpoints."""

from typing import TYPE_CHECKING

import structlog

from twist_cli.api.errors import ValidationError
from twist_cli.schemas import Conversation, ConversationMessage

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient

logger = structlog.get_logger()


class ConversationsAPI:
    """Conversations and the messages posted in them."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_conversations(self, workspace_id: int | None = None) -> list[Conversation]:
        return self._client.get(
            "/conversations/get",
            list[Conversation],
            workspace_id=workspace_id,
        )

    def get_or_create(self, user_ids: list[int]) -> Conversation:
        """Return the conversation between ``user_ids``, creating it if needed."""
        if not user_ids:
            raise ValidationError("a conversation needs at least one user")
        return self._client.post(
            "/conversations/get_or_create",
            {"user_ids": list(user_ids)},
            Conversation,
        )

    def list_messages(self, conversation_id: int) -> list[ConversationMessage]:
        return self._client.get(
            "/conversation_messages/get",
            list[ConversationMessage],
            conversation_id=conversation_id,
        )

    def send_message(
        self,
        conversation_id: int,
        content: str,
        recipients: list[int] | None = None,
    ) -> ConversationMessage:
        payload = {"conversation_id": conversation_id, "content": content}
        if recipients:
            payload["recipients"] = list(recipients)
        return self._client.post("/conversation_messages/add", payload, ConversationMessage)

    def send_direct_message(
        self,
        user_ids: list[int],
        content: str,
    ) -> tuple[Conversation, ConversationMessage]:
        """Resolve the conversation with ``user_ids`` and post ``content`` to it.

        The conversation is not rolled back when posting the message fails.
        """
        conversation = self.get_or_create(user_ids)
        logger.debug("Conversation resolved", conversation_id=conversation.id)
        message = self.send_message(conversation.id, content)
        return conversation, message

    def archive(self, conversation_id: int) -> None:
        self._client.post("/conversations/archive", {"id": conversation_id})

    def unarchive(self, conversation_id: int) -> None:
        self._client.post("/conversations/unarchive", {"id": conversation_id})

    def mute(self, conversation_id: int) -> None:
        self._client.post("/conversations/mute", {"id": conversation_id})

    def unmute(self, conversation_id: int) -> None:
        self._client.post("/conversations/unmute", {"id": conversation_id})

    def mark_read(self, conversation_id: int) -> None:
        self._client.post("/conversations/mark_read", {"id": conversation_id})

    def mark_unread(self, conversation_id: int) -> None:
        self._client.post("/conversations/mark_unread", {"id": conversation_id})
