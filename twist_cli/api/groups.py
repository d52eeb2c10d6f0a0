"""User group endpoints."""

from typing import TYPE_CHECKING

from twist_cli.api.payloads import OptionsInput, build_payload, require_changes
from twist_cli.schemas import Group, GroupOptions, GroupUpdate

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient


class GroupsAPI:
    """Workspace-scoped user groups."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_groups(self, workspace_id: int) -> list[Group]:
        return self._client.get("/groups/get", list[Group], workspace_id=workspace_id)

    def get_group(self, group_id: int) -> Group:
        return self._client.get("/groups/getone", Group, id=group_id)

    def create_group(
        self,
        workspace_id: int,
        name: str,
        options: GroupOptions | OptionsInput = None,
    ) -> Group:
        payload = build_payload(
            {"workspace_id": workspace_id, "name": name},
            options,
            GroupOptions,
        )
        return self._client.post("/groups/add", payload, Group)

    def update_group(self, group_id: int, changes: GroupUpdate | OptionsInput) -> Group:
        payload = {**require_changes(changes, GroupUpdate), "id": group_id}
        return self._client.post("/groups/update", payload, Group)

    def delete_group(self, group_id: int) -> None:
        self._client.post("/groups/remove", {"id": group_id})

    def add_user(self, group_id: int, user_id: int) -> None:
        self._client.post("/groups/add_user", {"id": group_id, "user_id": user_id})

    def remove_user(self, group_id: int, user_id: int) -> None:
        self._client.post("/groups/remove_user", {"id": group_id, "user_id": user_id})
