"""Workspace and workspace member endpoints."""

from typing import TYPE_CHECKING

from twist_cli.schemas import User, Workspace

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient


class WorkspacesAPI:
    """Read-only access to the workspaces the token can see."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_workspaces(self) -> list[Workspace]:
        return self._client.get("/workspaces/get", list[Workspace])


class UsersAPI:
    """Workspace members."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_users(self, workspace_id: int) -> list[User]:
        return self._client.get("/workspace_users/get", list[User], id=workspace_id)
