"""Channel endpoints."""

from typing import TYPE_CHECKING

from twist_cli.api.payloads import OptionsInput, build_payload, require_changes
from twist_cli.schemas import Channel, ChannelOptions, ChannelUpdate

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient


class ChannelsAPI:
    """Create, inspect and manage channels."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_channels(self, workspace_id: int, archived: bool = False) -> list[Channel]:
        """List channels in a workspace; ``archived`` lists only archived ones."""
        return self._client.get(
            "/channels/get",
            list[Channel],
            workspace_id=workspace_id,
            archived="true" if archived else None,
        )

    def get_channel(self, channel_id: int) -> Channel:
        return self._client.get("/channels/getone", Channel, id=channel_id)

    def create_channel(
        self,
        workspace_id: int,
        name: str,
        options: ChannelOptions | OptionsInput = None,
    ) -> Channel:
        payload = build_payload(
            {"workspace_id": workspace_id, "name": name},
            options,
            ChannelOptions,
        )
        return self._client.post("/channels/add", payload, Channel)

    def update_channel(self, channel_id: int, changes: ChannelUpdate | OptionsInput) -> Channel:
        payload = {**require_changes(changes, ChannelUpdate), "id": channel_id}
        return self._client.post("/channels/update", payload, Channel)

    def archive_channel(self, channel_id: int) -> None:
        self._client.post("/channels/archive", {"id": channel_id})

    def unarchive_channel(self, channel_id: int) -> None:
        self._client.post("/channels/unarchive", {"id": channel_id})

    def delete_channel(self, channel_id: int) -> None:
        """Remove a channel. The service only accepts archived channels."""
        self._client.post("/channels/remove", {"id": channel_id})

    def add_user(self, channel_id: int, user_id: int) -> None:
        self._client.post("/channels/add_user", {"id": channel_id, "user_id": user_id})

    def remove_user(self, channel_id: int, user_id: int) -> None:
        self._client.post("/channels/remove_user", {"id": channel_id, "user_id": user_id})
