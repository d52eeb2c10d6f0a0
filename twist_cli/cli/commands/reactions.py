"""Reaction commands."""

import typer

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id
from twist_cli.cli.formatting import output_list, print_fields, print_json, print_success

reactions_app = typer.Typer(
    name="reactions",
    help="Manage emoji reactions on threads and comments",
    no_args_is_help=True,
)

TargetArgument = typer.Argument(..., help="Target type: thread or comment")


@reactions_app.command(name="add")
def add_reaction(
    ctx: typer.Context,
    target_type: str = TargetArgument,
    target_id: str = typer.Argument(..., help="Thread or comment ID"),
    emoji: str = typer.Argument(..., help="Emoji to add"),
):
    """Add a reaction."""
    with api_errors("add reaction"):
        target_id = parse_id(target_id, "target")
        with open_client(ctx) as client:
            reaction = client.reactions.add_reaction(target_type, target_id, emoji)

    if get_state(ctx).json_output:
        print_json(reaction)
        return
    print_success("Reaction added successfully!")
    print_fields([("Reaction ID", reaction.id), ("Emoji", reaction.emoji)])


@reactions_app.command(name="remove")
def remove_reaction(
    ctx: typer.Context,
    target_type: str = TargetArgument,
    target_id: str = typer.Argument(..., help="Thread or comment ID"),
    emoji: str = typer.Argument(..., help="Emoji to remove"),
):
    """Remove a reaction."""
    with api_errors("remove reaction"):
        target_id = parse_id(target_id, "target")
        with open_client(ctx) as client:
            client.reactions.remove_reaction(target_type, target_id, emoji)
    print_success("Reaction removed successfully")


@reactions_app.command(name="list")
def list_reactions(
    ctx: typer.Context,
    target_type: str = TargetArgument,
    target_id: str = typer.Argument(..., help="Thread or comment ID"),
):
    """List reactions on a thread or comment."""
    with api_errors("get reactions"):
        target_id = parse_id(target_id, "target")
        with open_client(ctx) as client:
            reactions = client.reactions.list_reactions(target_type, target_id)

    output_list(
        reactions,
        json_output=get_state(ctx).json_output,
        empty_message="No reactions found.",
        columns=[("ID", "dim"), ("Emoji", "yellow"), ("User ID", "cyan")],
        row_builder=lambda r: [r.id, r.emoji, r.user_id],
    )
