"""Workspace and user commands."""

import typer

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id
from twist_cli.cli.formatting import output_list

workspaces_app = typer.Typer(name="workspaces", help="View Twist workspaces", no_args_is_help=True)
users_app = typer.Typer(name="users", help="View workspace users", no_args_is_help=True)


@workspaces_app.command(name="list")
def list_workspaces(ctx: typer.Context):
    """List the workspaces you belong to."""
    with api_errors("get workspaces"), open_client(ctx) as client:
        workspaces = client.workspaces.list_workspaces()

    output_list(
        workspaces,
        json_output=get_state(ctx).json_output,
        empty_message="No workspaces found.",
        columns=[("ID", "dim"), ("Name", "cyan"), ("Plan", "green")],
        row_builder=lambda ws: [ws.id, ws.name, ws.plan],
    )


@users_app.command(name="list")
def list_users(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
):
    """List users in a workspace."""
    with api_errors("get users"):
        workspace_id = parse_id(workspace_id, "workspace")
        with open_client(ctx) as client:
            users = client.users.list_users(workspace_id)

    output_list(
        users,
        json_output=get_state(ctx).json_output,
        empty_message="No users found in this workspace.",
        columns=[
            ("ID", "dim"),
            ("Name", "cyan"),
            ("Email", "blue"),
            ("Type", "green"),
            ("Bot", "yellow"),
            ("Removed", "red"),
        ],
        row_builder=lambda u: [u.id, u.name, u.email, u.user_type, u.bot, u.removed],
    )
