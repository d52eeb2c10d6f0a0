"""User group commands."""

import typer

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id, parse_ids
from twist_cli.cli.formatting import (
    format_ids,
    output_list,
    print_fields,
    print_json,
    print_success,
)
from twist_cli.schemas import Group, GroupOptions, GroupUpdate

groups_app = typer.Typer(name="groups", help="Manage user groups", no_args_is_help=True)


def _show_result(ctx: typer.Context, verb: str, group: Group) -> None:
    if get_state(ctx).json_output:
        print_json(group)
        return
    print_success(f"Group {verb} successfully!")
    print_fields([("Group ID", group.id), ("Name", group.name)])


@groups_app.command(name="list")
def list_groups(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
):
    """List groups in a workspace."""
    with api_errors("get groups"):
        workspace_id = parse_id(workspace_id, "workspace")
        with open_client(ctx) as client:
            groups = client.groups.list_groups(workspace_id)

    output_list(
        groups,
        json_output=get_state(ctx).json_output,
        empty_message="No groups found.",
        columns=[("ID", "dim"), ("Name", "cyan"), ("Members", "blue")],
        row_builder=lambda g: [g.id, g.name, len(g.user_ids)],
    )


@groups_app.command(name="show")
def show_group(
    ctx: typer.Context,
    group_id: str = typer.Argument(..., help="Group ID"),
):
    """Show group details."""
    with api_errors("get group"):
        group_id = parse_id(group_id, "group")
        with open_client(ctx) as client:
            group = client.groups.get_group(group_id)

    if get_state(ctx).json_output:
        print_json(group)
        return
    fields = [
        ("ID", group.id),
        ("Name", group.name),
        ("Description", group.description),
        ("Workspace ID", group.workspace_id),
        ("Members", len(group.user_ids)),
    ]
    if group.user_ids:
        fields.append(("User IDs", format_ids(group.user_ids)))
    print_fields(fields)


@groups_app.command(name="create")
def create_group(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
    name: str = typer.Argument(..., help="Group name"),
    description: str | None = typer.Option(None, "--description", help="Group description"),
    user_ids: str | None = typer.Option(None, "--user-ids", help="Comma-separated user IDs to add"),
):
    """Create a new group."""
    with api_errors("create group"):
        workspace_id = parse_id(workspace_id, "workspace")
        fields = {"description": description, "user_ids": parse_ids(user_ids) or None}
        options = GroupOptions(**{k: v for k, v in fields.items() if v is not None})
        with open_client(ctx) as client:
            group = client.groups.create_group(workspace_id, name, options)

    _show_result(ctx, "created", group)


@groups_app.command(name="update")
def update_group(
    ctx: typer.Context,
    group_id: str = typer.Argument(..., help="Group ID"),
    name: str | None = typer.Option(None, "--name", help="Group name"),
    description: str | None = typer.Option(None, "--description", help="Group description"),
):
    """Update a group's name or description."""
    fields = {"name": name, "description": description}
    changes = GroupUpdate(**{k: v for k, v in fields.items() if v is not None})
    with api_errors("update group"):
        group_id = parse_id(group_id, "group")
        with open_client(ctx) as client:
            group = client.groups.update_group(group_id, changes)

    _show_result(ctx, "updated", group)


@groups_app.command(name="delete")
def delete_group(
    ctx: typer.Context,
    group_id: str = typer.Argument(..., help="Group ID"),
):
    """Delete a group."""
    with api_errors("delete group"):
        group_id = parse_id(group_id, "group")
        with open_client(ctx) as client:
            client.groups.delete_group(group_id)
    print_success(f"Group {group_id} deleted successfully")


@groups_app.command(name="add-user")
def add_group_user(
    ctx: typer.Context,
    group_id: str = typer.Argument(..., help="Group ID"),
    user_id: str = typer.Argument(..., help="User ID"),
):
    """Add a user to a group."""
    with api_errors("add user to group"):
        group_id = parse_id(group_id, "group")
        user_id = parse_id(user_id, "user")
        with open_client(ctx) as client:
            client.groups.add_user(group_id, user_id)
    print_success(f"User {user_id} added to group {group_id} successfully")


@groups_app.command(name="remove-user")
def remove_group_user(
    ctx: typer.Context,
    group_id: str = typer.Argument(..., help="Group ID"),
    user_id: str = typer.Argument(..., help="User ID"),
):
    """Remove a user from a group."""
    with api_errors("remove user from group"):
        group_id = parse_id(group_id, "group")
        user_id = parse_id(user_id, "user")
        with open_client(ctx) as client:
            client.groups.remove_user(group_id, user_id)
    print_success(f"User {user_id} removed from group {group_id} successfully")
