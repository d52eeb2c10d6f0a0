"""Unit tests for reaction operations."""

import pytest

from twist_cli.api import ValidationError
from twist_cli.schemas import Reaction, ReactionTarget


class TestReactions:
    """Tests for reactions on threads and comments."""

    @pytest.mark.parametrize("target", ["thread", "comment"])
    def test_add_reaction(self, client, service, target):
        """Test adding a reaction to each supported target."""
        service.add("POST", "/reactions/add", {"id": 1, "emoji": "👍", "object_id": 12})

        reaction = client.reactions.add_reaction(target, 12, "👍")

        assert reaction == Reaction(id=1, emoji="👍", object_id=12)
        assert service.payload() == {"object_type": target, "object_id": 12, "emoji": "👍"}

    def test_remove_reaction(self, client, service):
        """Test removing a reaction."""
        service.add("POST", "/reactions/remove", {})

        client.reactions.remove_reaction(ReactionTarget.COMMENT, 3, "🎉")

        assert service.payload() == {"object_type": "comment", "object_id": 3, "emoji": "🎉"}

    @pytest.mark.parametrize("target,param", [("thread", "thread"), ("comment", "comment")])
    def test_list_reactions(self, client, service, target, param):
        """Test that the target kind selects the query parameter."""
        service.add("GET", "/reactions/get", [{"id": 1, "emoji": "👍", "user_id": 5}])

        reactions = client.reactions.list_reactions(target, 12)

        assert reactions[0].user_id == 5
        assert service.params() == {param: "12"}

    @pytest.mark.parametrize("target", ["conversation", "message", "", "THREAD"])
    def test_unknown_target_issues_no_request(self, client, service, target):
        """Test that unknown target kinds fail before any request."""
        with pytest.raises(ValidationError):
            client.reactions.add_reaction(target, 1, "👍")
        with pytest.raises(ValidationError):
            client.reactions.remove_reaction(target, 1, "👍")
        with pytest.raises(ValidationError):
            client.reactions.list_reactions(target, 1)

        assert service.requests == []
