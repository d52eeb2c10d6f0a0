"""Per-invocation state shared by the command groups."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import typer

from twist_cli.api import TwistClient, TwistError, ValidationError
from twist_cli.auth import resolve_token
from twist_cli.cli.formatting import print_error


@dataclass
class CLIState:
    """Global options collected by the root callback."""

    token: str | None = None
    json_output: bool = False
    verbose: bool = False


def get_state(ctx: typer.Context) -> CLIState:
    state = ctx.find_object(CLIState)
    return state if state is not None else CLIState()


def build_client(token: str) -> TwistClient:
    return TwistClient(token)


@contextmanager
def open_client(ctx: typer.Context) -> Iterator[TwistClient]:
    """Resolve the token and yield a client that is closed afterwards."""
    token = resolve_token(get_state(ctx).token)
    client = build_client(token)
    try:
        yield client
    finally:
        client.close()


@contextmanager
def api_errors(action: str) -> Iterator[None]:
    """Turn client errors into a stderr message and exit code 1."""
    try:
        yield
    except TwistError as e:
        print_error(f"failed to {action}: {e}")
        raise typer.Exit(code=1) from e


def parse_id(value: str, kind: str) -> int:
    """Parse one integer ID given on the command line."""
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"invalid {kind} ID: {value}") from None


def parse_optional_id(value: str | None, kind: str) -> int | None:
    return None if value is None else parse_id(value, kind)


def parse_ids(value: str | None, kind: str = "user") -> list[int]:
    """Parse a comma-separated list of integer IDs, skipping blanks."""
    if not value:
        return []
    return [parse_id(part.strip(), kind) for part in value.split(",") if part.strip()]
