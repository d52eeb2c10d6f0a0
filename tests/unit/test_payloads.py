"""Unit tests for payload helpers."""

import pytest

from twist_cli.api import ValidationError
from twist_cli.api.payloads import build_payload, coerce_target, dump_options, require_changes
from twist_cli.schemas import (
    AttachmentTarget,
    ChannelOptions,
    ChannelUpdate,
    GroupOptions,
    ReactionTarget,
)


class TestDumpOptions:
    """Tests for only-set-fields serialization."""

    def test_unset_fields_are_omitted(self):
        """Test that fields the caller did not set never appear."""
        assert dump_options(ChannelOptions(color=3), ChannelOptions) == {"color": 3}

    def test_no_options(self):
        """Test that missing options serialize to nothing."""
        assert dump_options(None, ChannelOptions) == {}
        assert dump_options(ChannelOptions(), ChannelOptions) == {}

    def test_falsy_values_are_kept(self):
        """Test that explicit false/zero/empty values are sent."""
        options = ChannelOptions(public=False, color=0, description="")
        assert dump_options(options, ChannelOptions) == {
            "public": False,
            "color": 0,
            "description": "",
        }

    def test_mapping_is_validated(self):
        """Test that plain mappings are accepted and validated."""
        assert dump_options({"icon": 7, "user_ids": [1, 2]}, ChannelOptions) == {
            "icon": 7,
            "user_ids": [1, 2],
        }

    def test_unknown_field_rejected(self):
        """Test that unknown option names are rejected locally."""
        with pytest.raises(ValidationError):
            dump_options({"colour": 3}, ChannelOptions)

    @pytest.mark.parametrize("fields", [{"color": 12}, {"color": -1}, {"icon": 0}, {"icon": 256}])
    def test_out_of_range_rejected(self, fields):
        """Test that channel color and icon ranges are enforced."""
        with pytest.raises(ValidationError):
            dump_options(fields, ChannelOptions)

    def test_wrong_model_rejected(self):
        """Test that options of another resource are rejected."""
        with pytest.raises(ValidationError):
            dump_options(GroupOptions(description="x"), ChannelOptions)


class TestBuildPayload:
    """Tests for merging options with required fields."""

    def test_merges_options_with_required_fields(self):
        """Test that options are merged next to required fields."""
        payload = build_payload(
            {"workspace_id": 100, "name": "general"},
            ChannelOptions(description="Talk", public=True),
            ChannelOptions,
        )
        assert payload == {
            "workspace_id": 100,
            "name": "general",
            "description": "Talk",
            "public": True,
        }

    def test_required_fields_win(self):
        """Test that options can never replace a required field."""
        payload = build_payload({"id": 5}, ChannelUpdate(name="renamed"), ChannelUpdate)
        assert payload["id"] == 5
        assert payload["name"] == "renamed"


class TestRequireChanges:
    """Tests for update validation."""

    def test_empty_update_rejected(self):
        """Test that an update with no fields is rejected."""
        with pytest.raises(ValidationError, match="no updates specified"):
            require_changes(ChannelUpdate(), ChannelUpdate)

    def test_returns_set_fields(self):
        """Test that set fields are returned."""
        assert require_changes({"name": "x"}, ChannelUpdate) == {"name": "x"}


class TestCoerceTarget:
    """Tests for discriminator validation."""

    def test_accepts_strings_and_members(self):
        """Test that both strings and enum members resolve."""
        assert coerce_target("thread", ReactionTarget) is ReactionTarget.THREAD
        assert coerce_target(AttachmentTarget.COMMENT, AttachmentTarget) is AttachmentTarget.COMMENT

    def test_unknown_target_rejected(self):
        """Test that unknown discriminators raise ValidationError."""
        with pytest.raises(ValidationError, match="'thread', 'comment'"):
            coerce_target("conversation", ReactionTarget)

    def test_matching_is_case_sensitive(self):
        """Test that discriminators must match exactly."""
        with pytest.raises(ValidationError):
            coerce_target("Thread", AttachmentTarget)
