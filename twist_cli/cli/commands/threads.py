"""Thread and comment commands."""

import typer
from rich.markup import escape
from rich.rule import Rule

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id, parse_ids
from twist_cli.cli.formatting import (
    console,
    display_title,
    format_ts,
    output_list,
    print_fields,
    print_json,
    print_success,
)
from twist_cli.schemas import ThreadUpdate

threads_app = typer.Typer(name="threads", help="Manage Twist threads", no_args_is_help=True)
comments_app = typer.Typer(name="comments", help="Manage thread comments", no_args_is_help=True)

NotifyOption = typer.Option(None, "--notify", help="Comma-separated user IDs to notify")


@threads_app.command(name="list")
def list_threads(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
):
    """List threads in a channel."""
    with api_errors("get threads"):
        channel_id = parse_id(channel_id, "channel")
        with open_client(ctx) as client:
            threads = client.threads.list_threads(channel_id)

    output_list(
        threads,
        json_output=get_state(ctx).json_output,
        empty_message="No threads found in this channel.",
        columns=[("ID", "dim"), ("Title", "cyan"), ("Comments", "blue"), ("Last updated", "magenta")],
        row_builder=lambda t: [
            t.id,
            display_title(t.title, 50),
            t.comment_count,
            format_ts(t.last_updated_ts),
        ],
    )


@threads_app.command(name="show")
def show_thread(
    ctx: typer.Context,
    thread_id: str = typer.Argument(..., help="Thread ID"),
):
    """Show a thread with its content and replies."""
    with api_errors("get thread"):
        thread_id = parse_id(thread_id, "thread")
        with open_client(ctx) as client:
            thread = client.threads.get_thread(thread_id)
            comments = client.comments.list_comments(thread_id)

    if get_state(ctx).json_output:
        console.print_json(
            data={
                "thread": thread.model_dump(mode="json"),
                "comments": [c.model_dump(mode="json") for c in comments],
            }
        )
        return

    console.print(Rule(f"Thread #{thread.id}: {escape(thread.title)}", align="left"))
    console.print(f"Posted: {format_ts(thread.posted_ts, '%Y-%m-%d %H:%M:%S')}")
    console.print(f"Comments: {thread.comment_count}")
    console.print()
    console.print(thread.content, markup=False)

    if comments:
        console.print()
        console.print(Rule(f"Replies ({len(comments)})", align="left"))
        for i, comment in enumerate(comments, start=1):
            posted = format_ts(comment.posted_ts, "%Y-%m-%d %H:%M:%S")
            console.print(f"\n[bold][{i}][/bold] User {comment.creator} • {posted}")
            console.print(comment.content, markup=False)


@threads_app.command(name="create")
def create_thread(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID"),
    title: str = typer.Argument(..., help="Thread title"),
    content: str = typer.Argument(..., help="Thread content"),
    notify: str | None = NotifyOption,
):
    """Create a new thread in a channel."""
    with api_errors("create thread"):
        channel_id = parse_id(channel_id, "channel")
        recipients = parse_ids(notify)
        with open_client(ctx) as client:
            thread = client.threads.create_thread(channel_id, title, content, recipients)

    if get_state(ctx).json_output:
        print_json(thread)
        return
    print_success("Thread created successfully!")
    print_fields([("Thread ID", thread.id), ("Title", thread.title)])
    if recipients:
        console.print(f"Notified {len(recipients)} user(s)")


@threads_app.command(name="reply")
def reply_thread(
    ctx: typer.Context,
    thread_id: str = typer.Argument(..., help="Thread ID"),
    message: list[str] = typer.Argument(..., help="Reply text"),
    notify: str | None = NotifyOption,
):
    """Post a comment to an existing thread."""
    content = " ".join(message)
    with api_errors("post reply"):
        thread_id = parse_id(thread_id, "thread")
        recipients = parse_ids(notify)
        with open_client(ctx) as client:
            comment = client.comments.create_comment(thread_id, content, recipients)

    if get_state(ctx).json_output:
        print_json(comment)
        return
    print_success(f"Reply posted successfully (comment #{comment.id})")
    if recipients:
        console.print(f"Notified {len(recipients)} user(s)")


@threads_app.command(name="update")
def update_thread(
    ctx: typer.Context,
    thread_id: str = typer.Argument(..., help="Thread ID"),
    title: str | None = typer.Option(None, "--title", help="Thread title"),
    content: str | None = typer.Option(None, "--content", help="Thread content"),
):
    """Update a thread's title or content."""
    fields = {"title": title, "content": content}
    changes = ThreadUpdate(**{k: v for k, v in fields.items() if v is not None})
    with api_errors("update thread"):
        thread_id = parse_id(thread_id, "thread")
        with open_client(ctx) as client:
            thread = client.threads.update_thread(thread_id, changes)

    if get_state(ctx).json_output:
        print_json(thread)
        return
    print_success("Thread updated successfully!")
    print_fields([("Thread ID", thread.id), ("Title", thread.title)])


def _register_action(name: str, method: str, past: str, doc: str) -> None:
    def command(
        ctx: typer.Context,
        thread_id: str = typer.Argument(..., help="Thread ID"),
    ):
        with api_errors(f"{name} thread"):
            thread_id = parse_id(thread_id, "thread")
            with open_client(ctx) as client:
                getattr(client.threads, method)(thread_id)
        print_success(f"Thread {thread_id} {past} successfully")

    command.__doc__ = doc
    threads_app.command(name=name)(command)


_register_action("delete", "delete_thread", "deleted", "Delete a thread.")
_register_action("pin", "pin_thread", "pinned", "Pin a thread.")
_register_action("unpin", "unpin_thread", "unpinned", "Unpin a thread.")
_register_action("star", "star_thread", "starred", "Star a thread.")
_register_action("unstar", "unstar_thread", "unstarred", "Unstar a thread.")
_register_action("archive", "archive_thread", "archived", "Archive a thread.")
_register_action("unarchive", "unarchive_thread", "unarchived", "Unarchive a thread.")


@comments_app.command(name="update")
def update_comment(
    ctx: typer.Context,
    comment_id: str = typer.Argument(..., help="Comment ID"),
    content: list[str] = typer.Argument(..., help="New comment text"),
):
    """Replace a comment's content."""
    with api_errors("update comment"):
        comment_id = parse_id(comment_id, "comment")
        with open_client(ctx) as client:
            comment = client.comments.update_comment(comment_id, " ".join(content))

    if get_state(ctx).json_output:
        print_json(comment)
        return
    print_success("Comment updated successfully!")
    print_fields([("Comment ID", comment.id)])


@comments_app.command(name="delete")
def delete_comment(
    ctx: typer.Context,
    comment_id: str = typer.Argument(..., help="Comment ID"),
):
    """Delete a comment."""
    with api_errors("delete comment"):
        comment_id = parse_id(comment_id, "comment")
        with open_client(ctx) as client:
            client.comments.delete_comment(comment_id)
    print_success(f"Comment {comment_id} deleted successfully")
