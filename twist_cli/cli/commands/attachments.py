"""Attachment commands."""

from pathlib import Path

import typer

from twist_cli.cli.context import api_errors, get_state, open_client, parse_id
from twist_cli.cli.formatting import (
    format_size,
    output_list,
    print_fields,
    print_json,
    print_success,
)

attachments_app = typer.Typer(
    name="attachments",
    help="Upload, download and list attachments",
    no_args_is_help=True,
)

TargetArgument = typer.Argument(..., help="Target type: thread, comment or conversation")


@attachments_app.command(name="upload")
def upload_attachment(
    ctx: typer.Context,
    target_type: str = TargetArgument,
    target_id: str = typer.Argument(..., help="Target object ID"),
    file_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="File to upload"
    ),
):
    """Upload a file to a thread, comment or conversation."""
    with api_errors("upload attachment"):
        target_id = parse_id(target_id, "target")
        with open_client(ctx) as client:
            attachment = client.attachments.upload(target_type, target_id, file_path)

    if get_state(ctx).json_output:
        print_json(attachment)
        return
    print_success("Attachment uploaded successfully!")
    print_fields(
        [
            ("Attachment ID", attachment.id),
            ("Title", attachment.title),
            ("Size", format_size(attachment.size)),
        ]
    )


@attachments_app.command(name="download")
def download_attachment(
    ctx: typer.Context,
    attachment_id: str = typer.Argument(..., help="Attachment ID"),
    output_path: Path = typer.Argument(..., dir_okay=False, help="Where to write the file"),
):
    """Download an attachment to a local file."""
    with api_errors("download attachment"):
        attachment_id = parse_id(attachment_id, "attachment")
        with open_client(ctx) as client:
            path = client.attachments.download(attachment_id, output_path)
    print_success(f"Attachment downloaded successfully to {path}")


@attachments_app.command(name="list")
def list_attachments(
    ctx: typer.Context,
    target_type: str = TargetArgument,
    target_id: str = typer.Argument(..., help="Target object ID"),
):
    """List attachments on a thread, comment or conversation."""
    with api_errors("get attachments"):
        target_id = parse_id(target_id, "target")
        with open_client(ctx) as client:
            attachments = client.attachments.list_attachments(target_type, target_id)

    output_list(
        attachments,
        json_output=get_state(ctx).json_output,
        empty_message="No attachments found.",
        columns=[("ID", "dim"), ("Title", "cyan"), ("Size", "blue"), ("Type", "green")],
        row_builder=lambda a: [a.id, a.title, format_size(a.size), a.mime_type],
    )
