"""Thread and comment endpoints."""

from typing import TYPE_CHECKING, Any

from twist_cli.api.payloads import OptionsInput, require_changes
from twist_cli.schemas import Comment, Thread, ThreadUpdate

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient


def _with_recipients(payload: dict[str, Any], recipients: list[int] | None) -> dict[str, Any]:
    if recipients:
        payload["recipients"] = list(recipients)
    return payload


class ThreadsAPI:
    """Threads inside a channel."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_threads(self, channel_id: int) -> list[Thread]:
        return self._client.get("/threads/get", list[Thread], channel_id=channel_id)

    def get_thread(self, thread_id: int) -> Thread:
        return self._client.get("/threads/getone", Thread, id=thread_id)

    def create_thread(
        self,
        channel_id: int,
        title: str,
        content: str,
        recipients: list[int] | None = None,
    ) -> Thread:
        """Start a thread, notifying ``recipients`` when given."""
        payload = _with_recipients(
            {"channel_id": channel_id, "title": title, "content": content},
            recipients,
        )
        return self._client.post("/threads/add", payload, Thread)

    def update_thread(self, thread_id: int, changes: ThreadUpdate | OptionsInput) -> Thread:
        payload = {**require_changes(changes, ThreadUpdate), "id": thread_id}
        return self._client.post("/threads/update", payload, Thread)

    def delete_thread(self, thread_id: int) -> None:
        self._client.post("/threads/remove", {"id": thread_id})

    def pin_thread(self, thread_id: int) -> None:
        self._client.post("/threads/pin", {"id": thread_id})

    def unpin_thread(self, thread_id: int) -> None:
        self._client.post("/threads/unpin", {"id": thread_id})

    def star_thread(self, thread_id: int) -> None:
        self._client.post("/threads/star", {"id": thread_id})

    def unstar_thread(self, thread_id: int) -> None:
        self._client.post("/threads/unstar", {"id": thread_id})

    def archive_thread(self, thread_id: int) -> None:
        self._client.post("/threads/archive", {"id": thread_id})

    def unarchive_thread(self, thread_id: int) -> None:
        self._client.post("/threads/unarchive", {"id": thread_id})


class CommentsAPI:
    """Replies within a thread."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_comments(self, thread_id: int) -> list[Comment]:
        return self._client.get("/comments/get", list[Comment], thread_id=thread_id)

    def create_comment(
        self,
        thread_id: int,
        content: str,
        recipients: list[int] | None = None,
    ) -> Comment:
        payload = _with_recipients({"thread_id": thread_id, "content": content}, recipients)
        return self._client.post("/comments/add", payload, Comment)

    def update_comment(self, comment_id: int, content: str) -> Comment:
        return self._client.post(
            "/comments/update",
            {"id": comment_id, "content": content},
            Comment,
        )

    def delete_comment(self, comment_id: int) -> None:
        self._client.post("/comments/remove", {"id": comment_id})
