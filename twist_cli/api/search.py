"""Search endpoints.

Results come back in the order the service ranks them.
"""

from typing import TYPE_CHECKING

from twist_cli.schemas import Comment, ConversationMessage, Thread

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient


def _positive(value: int | None) -> int | None:
    """Filters of zero or less are left out of the query."""
    return value if value is not None and value > 0 else None


class SearchAPI:
    """Full-text search over threads, comments and direct messages."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def search_threads(
        self,
        workspace_id: int,
        query: str,
        channel_id: int | None = None,
        limit: int | None = None,
    ) -> list[Thread]:
        return self._client.get(
            "/threads/search",
            list[Thread],
            workspace_id=workspace_id,
            query=query,
            channel_id=_positive(channel_id),
            limit=_positive(limit),
        )

    def search_comments(
        self,
        workspace_id: int,
        query: str,
        limit: int | None = None,
    ) -> list[Comment]:
        return self._client.get(
            "/comments/search",
            list[Comment],
            workspace_id=workspace_id,
            query=query,
            limit=_positive(limit),
        )

    def search_conversation_messages(
        self,
        query: str,
        limit: int | None = None,
    ) -> list[ConversationMessage]:
        return self._client.get(
            "/conversation_messages/search",
            list[ConversationMessage],
            query=query,
            limit=_positive(limit),
        )
