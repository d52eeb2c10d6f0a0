"""Direct message commands."""

import typer
from rich.rule import Rule

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id, parse_optional_id
from twist_cli.cli.formatting import (
    console,
    format_ids,
    format_ts,
    output_list,
    print_json,
    print_success,
)

conversations_app = typer.Typer(
    name="conversations",
    help="Manage direct message conversations",
    no_args_is_help=True,
)


@conversations_app.command(name="list")
def list_conversations(
    ctx: typer.Context,
    workspace_id: str | None = typer.Option(None, "--workspace-id", help="Workspace ID"),
):
    """List your conversations."""
    with api_errors("get conversations"):
        workspace_id = parse_optional_id(workspace_id, "workspace")
        with open_client(ctx) as client:
            conversations = client.conversations.list_conversations(workspace_id)

    output_list(
        conversations,
        json_output=get_state(ctx).json_output,
        empty_message="No conversations found.",
        columns=[("ID", "dim"), ("Participants", "cyan"), ("Messages", "blue"), ("Created", "magenta")],
        row_builder=lambda c: [
            c.id,
            format_ids(c.user_ids),
            c.message_count,
            format_ts(c.created_ts, "%Y-%m-%d"),
        ],
    )


@conversations_app.command(name="show")
def show_conversation(
    ctx: typer.Context,
    conversation_id: str = typer.Argument(..., help="Conversation ID"),
):
    """Show the messages of a conversation."""
    with api_errors("get messages"):
        conversation_id = parse_id(conversation_id, "conversation")
        with open_client(ctx) as client:
            messages = client.conversations.list_messages(conversation_id)

    if get_state(ctx).json_output:
        print_json(messages)
        return

    console.print(Rule(f"Conversation #{conversation_id}", align="left"))
    if not messages:
        console.print("\nNo messages yet.", style="yellow")
        return
    for message in messages:
        posted = format_ts(message.created_ts, "%Y-%m-%d %H:%M:%S")
        console.print(f"\n[bold]User {message.user_id}[/] • {posted}")
        console.print(message.content, markup=False)


@conversations_app.command(name="send")
def send_message(
    ctx: typer.Context,
    user_id: str = typer.Argument(..., help="Recipient user ID"),
    message: list[str] = typer.Argument(..., help="Message text"),
):
    """Send a direct message to a user."""
    content = " ".join(message)
    with api_errors("send message"):
        user_id = parse_id(user_id, "user")
        with open_client(ctx) as client:
            conversation, sent = client.conversations.send_direct_message([user_id], content)

    if get_state(ctx).json_output:
        console.print_json(
            data={
                "conversation": conversation.model_dump(mode="json"),
                "message": sent.model_dump(mode="json"),
            }
        )
        return
    print_success(
        f"Message sent successfully (message #{sent.id} in conversation #{conversation.id})"
    )


def _register_action(name: str, method: str, done: str, doc: str) -> None:
    def command(
        ctx: typer.Context,
        conversation_id: str = typer.Argument(..., help="Conversation ID"),
    ):
        with api_errors(f"{name} conversation"):
            conversation_id = parse_id(conversation_id, "conversation")
            with open_client(ctx) as client:
                getattr(client.conversations, method)(conversation_id)
        print_success(f"Conversation {conversation_id} {done}")

    command.__doc__ = doc
    conversations_app.command(name=name)(command)


_register_action("archive", "archive", "archived successfully", "Archive a conversation.")
_register_action("unarchive", "unarchive", "unarchived successfully", "Unarchive a conversation.")
_register_action("mute", "mute", "muted successfully", "Mute a conversation.")
_register_action("unmute", "unmute", "unmuted successfully", "Unmute a conversation.")
_register_action("mark-read", "mark_read", "marked as read", "Mark a conversation as read.")
_register_action("mark-unread", "mark_unread", "marked as unread", "Mark a conversation as unread.")
