"""Unit tests for thread and comment operations."""

import pytest

from tests.mock_service import echo
from twist_cli.api import ValidationError
from twist_cli.schemas import Comment, Thread, ThreadUpdate


class TestThreads:
    """Tests for thread operations."""

    def test_list_threads(self, client, service):
        """Test listing threads in a channel."""
        service.add(
            "GET",
            "/threads/get",
            [{"id": 1, "title": "Roadmap", "comment_count": 4, "participants": [1, 2]}],
        )

        threads = client.threads.list_threads(31)

        assert threads == [Thread(id=1, title="Roadmap", comment_count=4, participants=[1, 2])]
        assert service.params() == {"channel_id": "31"}

    def test_get_thread(self, client, service):
        """Test fetching one thread."""
        service.add("GET", "/threads/getone", {"id": 12, "title": "Hello", "pinned": True})

        thread = client.threads.get_thread(12)

        assert thread.pinned is True
        assert service.params() == {"id": "12"}

    def test_create_thread_without_recipients(self, client, service):
        """Test that recipients are omitted when none are given."""
        service.add("POST", "/threads/add", handler=echo(40))

        thread = client.threads.create_thread(31, "Hello", "First post")

        assert service.payload() == {"channel_id": 31, "title": "Hello", "content": "First post"}
        assert thread.id == 40

    def test_create_thread_with_recipients(self, client, service):
        """Test that recipients are sent when given."""
        service.add("POST", "/threads/add", handler=echo(41))

        client.threads.create_thread(31, "Hello", "Body", recipients=[2, 3])

        assert service.payload()["recipients"] == [2, 3]

    def test_update_thread(self, client, service):
        """Test updating only a thread's title."""
        service.add("POST", "/threads/update", handler=echo(12))

        thread = client.threads.update_thread(12, ThreadUpdate(title="New title"))

        assert service.payload() == {"id": 12, "title": "New title"}
        assert thread.title == "New title"

    def test_empty_update_rejected(self, client, service):
        """Test that a thread update without changes is rejected locally."""
        with pytest.raises(ValidationError):
            client.threads.update_thread(12, {})
        assert service.requests == []

    @pytest.mark.parametrize(
        "method,path",
        [
            ("delete_thread", "/threads/remove"),
            ("pin_thread", "/threads/pin"),
            ("unpin_thread", "/threads/unpin"),
            ("star_thread", "/threads/star"),
            ("unstar_thread", "/threads/unstar"),
            ("archive_thread", "/threads/archive"),
            ("unarchive_thread", "/threads/unarchive"),
        ],
    )
    def test_thread_actions(self, client, service, method, path):
        """Test actions that post only the thread id."""
        service.add("POST", path, {})

        getattr(client.threads, method)(12)

        assert service.path() == path
        assert service.payload() == {"id": 12}


class TestComments:
    """Tests for comment operations."""

    def test_list_comments(self, client, service):
        """Test listing the comments of a thread."""
        service.add("GET", "/comments/get", [{"id": 3, "content": "+1", "thread_id": 12}])

        comments = client.comments.list_comments(12)

        assert comments == [Comment(id=3, content="+1", thread_id=12)]
        assert service.params() == {"thread_id": "12"}

    def test_create_comment(self, client, service):
        """Test replying to a thread."""
        service.add("POST", "/comments/add", handler=echo(77))

        comment = client.comments.create_comment(12, "Looks good", recipients=[5])

        assert service.payload() == {"thread_id": 12, "content": "Looks good", "recipients": [5]}
        assert comment.id == 77

    def test_update_comment(self, client, service):
        """Test editing a comment."""
        service.add("POST", "/comments/update", handler=echo(77))

        comment = client.comments.update_comment(77, "Edited")

        assert service.payload() == {"id": 77, "content": "Edited"}
        assert comment.content == "Edited"

    def test_delete_comment(self, client, service):
        """Test deleting a comment."""
        service.add("POST", "/comments/remove", {})

        client.comments.delete_comment(77)

        assert service.payload() == {"id": 77}
