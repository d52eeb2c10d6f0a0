"""Channel management commands."""

import typer

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id, parse_ids
from twist_cli.cli.formatting import (
    format_ts,
    output_list,
    print_fields,
    print_json,
    print_success,
)
from twist_cli.schemas import Channel

channels_app = typer.Typer(
    name="channels",
    help="Manage Twist channels",
    no_args_is_help=True,
)

ColorOption = typer.Option(None, "--color", help="Channel color (0-11)")
IconOption = typer.Option(None, "--icon", help="Channel icon (1-255)")
PublicOption = typer.Option(
    None, "--public/--private", help="Make the channel public or private"
)


def _show_result(ctx: typer.Context, verb: str, channel: Channel) -> None:
    if get_state(ctx).json_output:
        print_json(channel)
        return
    print_success(f"Channel {verb} successfully!")
    print_fields([("Channel ID", channel.id), ("Name", channel.name)])


@channels_app.command(name="list")
def list_channels(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
    archived: bool = typer.Option(False, "--archived", help="Show only archived channels"),
):
    """List all channels in a workspace."""
    with api_errors("get channels"):
        workspace_id = parse_id(workspace_id, "workspace")
        with open_client(ctx) as client:
            channels = client.channels.list_channels(workspace_id, archived=archived)

    output_list(
        channels,
        json_output=get_state(ctx).json_output,
        empty_message="No channels found.",
        columns=[("ID", "dim"), ("Name", "cyan"), ("Public", "green"), ("Archived", "yellow")],
        row_builder=lambda ch: [ch.id, ch.name, ch.public, ch.archived],
    )


@channels_app.command(name="show")
def show_channel(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
):
    """Show channel details."""
    with api_errors("get channel"):
        channel_id = parse_id(channel_id, "channel")
        with open_client(ctx) as client:
            channel = client.channels.get_channel(channel_id)

    if get_state(ctx).json_output:
        print_json(channel)
        return
    print_fields(
        [
            ("ID", channel.id),
            ("Name", channel.name),
            ("Description", channel.description),
            ("Workspace ID", channel.workspace_id),
            ("Public", channel.public),
            ("Archived", channel.archived),
            ("Color", channel.color),
            ("Icon", channel.icon),
            ("Created", format_ts(channel.created_ts)),
        ]
    )


@channels_app.command(name="create")
def create_channel(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
    name: str = typer.Argument(..., help="Channel name"),
    description: str | None = typer.Option(None, "--description", help="Channel description"),
    color: int | None = ColorOption,
    icon: int | None = IconOption,
    public: bool | None = PublicOption,
    user_ids: str | None = typer.Option(
        None, "--user-ids", help="Comma-separated user IDs to add"
    ),
):
    """Create a new channel."""
    with api_errors("create channel"):
        workspace_id = parse_id(workspace_id, "workspace")
        fields = {
            "description": description,
            "color": color,
            "icon": icon,
            "public": public,
            "user_ids": parse_ids(user_ids) or None,
        }
        options = {k: v for k, v in fields.items() if v is not None}
        with open_client(ctx) as client:
            channel = client.channels.create_channel(workspace_id, name, options)

    _show_result(ctx, "created", channel)


@channels_app.command(name="update")
def update_channel(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
    name: str | None = typer.Option(None, "--name", help="Channel name"),
    description: str | None = typer.Option(None, "--description", help="Channel description"),
    color: int | None = ColorOption,
    icon: int | None = IconOption,
    public: bool | None = PublicOption,
):
    """Update channel properties."""
    fields = {
        "name": name,
        "description": description,
        "color": color,
        "icon": icon,
        "public": public,
    }
    changes = {k: v for k, v in fields.items() if v is not None}
    with api_errors("update channel"):
        channel_id = parse_id(channel_id, "channel")
        with open_client(ctx) as client:
            channel = client.channels.update_channel(channel_id, changes)

    _show_result(ctx, "updated", channel)


@channels_app.command(name="archive")
def archive_channel(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
):
    """Archive a channel."""
    with api_errors("archive channel"):
        channel_id = parse_id(channel_id, "channel")
        with open_client(ctx) as client:
            client.channels.archive_channel(channel_id)
    print_success(f"Channel {channel_id} archived successfully")


@channels_app.command(name="unarchive")
def unarchive_channel(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
):
    """Unarchive a previously archived channel."""
    with api_errors("unarchive channel"):
        channel_id = parse_id(channel_id, "channel")
        with open_client(ctx) as client:
            client.channels.unarchive_channel(channel_id)
    print_success(f"Channel {channel_id} unarchived successfully")


@channels_app.command(name="delete")
def delete_channel(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
):
    """Delete a channel. It must be archived first."""
    with api_errors("delete channel"):
        channel_id = parse_id(channel_id, "channel")
        with open_client(ctx) as client:
            client.channels.delete_channel(channel_id)
    print_success(f"Channel {channel_id} deleted successfully")


@channels_app.command(name="add-user")
def add_channel_user(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
    user_id: str = typer.Argument(..., help="User ID"),
):
    """Add a user to a channel."""
    with api_errors("add user to channel"):
        channel_id = parse_id(channel_id, "channel")
        user_id = parse_id(user_id, "user")
        with open_client(ctx) as client:
            client.channels.add_user(channel_id, user_id)
    print_success(f"User {user_id} added to channel {channel_id} successfully")


@channels_app.command(name="remove-user")
def remove_channel_user(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
    user_id: str = typer.Argument(..., help="User ID"),
):
    """Remove a user from a channel."""
    with api_errors("remove user from channel"):
        channel_id = parse_id(channel_id, "channel")
        user_id = parse_id(user_id, "user")
        with open_client(ctx) as client:
            client.channels.remove_user(channel_id, user_id)
    print_success(f"User {user_id} removed from channel {channel_id} successfully")
