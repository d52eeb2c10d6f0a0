"""Search commands."""

import typer

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id, parse_optional_id
from twist_cli.cli.formatting import console, display_title, format_ts, output_list, snippet

search_app = typer.Typer(
    name="search",
    help="Search threads, messages and conversations",
    no_args_is_help=True,
)

LimitOption = typer.Option(None, "--limit", help="Maximum number of results")


def _print_count(ctx: typer.Context, count: int, noun: str) -> None:
    if count and not get_state(ctx).json_output:
        console.print(f"\nFound {count} {noun}(s)")


@search_app.command(name="threads")
def search_threads(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
    query: str = typer.Argument(..., help="Search query"),
    channel_id: str | None = typer.Option(
        None, "--channel-id", help="Limit search to a specific channel"
    ),
    limit: int | None = LimitOption,
):
    """Search threads in a workspace."""
    with api_errors("search threads"):
        workspace_id = parse_id(workspace_id, "workspace")
        channel_id = parse_optional_id(channel_id, "channel")
        with open_client(ctx) as client:
            threads = client.search.search_threads(
                workspace_id, query, channel_id=channel_id, limit=limit
            )

    output_list(
        threads,
        json_output=get_state(ctx).json_output,
        empty_message="No threads found matching the query.",
        columns=[("ID", "dim"), ("Title", "cyan"), ("Channel", "green"), ("Last updated", "magenta")],
        row_builder=lambda t: [
            t.id,
            display_title(t.title, 40),
            t.channel_id,
            format_ts(t.last_updated_ts),
        ],
    )
    _print_count(ctx, len(threads), "thread")


@search_app.command(name="messages")
def search_messages(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
    query: str = typer.Argument(..., help="Search query"),
    limit: int | None = LimitOption,
):
    """Search thread comments in a workspace."""
    with api_errors("search messages"):
        workspace_id = parse_id(workspace_id, "workspace")
        with open_client(ctx) as client:
            comments = client.search.search_comments(workspace_id, query, limit=limit)

    output_list(
        comments,
        json_output=get_state(ctx).json_output,
        empty_message="No messages found matching the query.",
        columns=[("ID", "dim"), ("Thread", "green"), ("Content", "cyan"), ("Posted", "magenta")],
        row_builder=lambda c: [c.id, c.thread_id, snippet(c.content), format_ts(c.posted_ts)],
    )
    _print_count(ctx, len(comments), "message")


@search_app.command(name="conversations")
def search_conversations(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query"),
    limit: int | None = LimitOption,
):
    """Search direct messages."""
    with api_errors("search conversations"), open_client(ctx) as client:
        messages = client.search.search_conversation_messages(query, limit=limit)

    output_list(
        messages,
        json_output=get_state(ctx).json_output,
        empty_message="No conversation messages found matching the query.",
        columns=[("ID", "dim"), ("Conversation", "green"), ("Content", "cyan"), ("Posted", "magenta")],
        row_builder=lambda m: [m.id, m.conversation_id, snippet(m.content), format_ts(m.created_ts)],
    )
    _print_count(ctx, len(messages), "message")
