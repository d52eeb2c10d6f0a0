"""twist CLI - main entry point."""

import logging
import sys

import structlog
import typer

from twist_cli import __version__
from twist_cli.cli.commands.attachments import attachments_app
from twist_cli.cli.commands.channels import channels_app
from twist_cli.cli.commands.conversations import conversations_app
from twist_cli.cli.commands.groups import groups_app
from twist_cli.cli.commands.reactions import reactions_app
from twist_cli.cli.commands.search import search_app
from twist_cli.cli.commands.threads import comments_app, threads_app
from twist_cli.cli.commands.workspaces import users_app, workspaces_app
from twist_cli.cli.context import CLIState
from twist_cli.cli.formatting import console
from twist_cli.config import settings


def configure_logging(level: str) -> None:
    """Configure structured logging on stderr."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


app = typer.Typer(
    name="twist",
    help="Command line interface for the Twist API",
    no_args_is_help=True,
    add_completion=False,
)

# Register command groups
app.add_typer(workspaces_app, name="workspaces")
app.add_typer(users_app, name="users")
app.add_typer(channels_app, name="channels")
app.add_typer(threads_app, name="threads")
app.add_typer(comments_app, name="comments")
app.add_typer(conversations_app, name="conversations")
app.add_typer(groups_app, name="groups")
app.add_typer(reactions_app, name="reactions")
app.add_typer(attachments_app, name="attachments")
app.add_typer(search_app, name="search")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"twist {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    token: str | None = typer.Option(
        None, "--token", help="Twist API token (or set TWIST_API_TOKEN)"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP activity to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Manage Twist workspaces, channels, threads and conversations.

    Authenticate with your personal access token via --token, the
    TWIST_API_TOKEN environment variable, or the saved config file.
    """
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = CLIState(token=token, json_output=json_output, verbose=verbose)


def main() -> None:
    """Entry point for the twist command."""
    app()


if __name__ == "__main__":
    main()
