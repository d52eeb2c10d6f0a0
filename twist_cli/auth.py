"""API token resolution and the persisted token file."""

import os
import sys
from pathlib import Path

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.prompt import Prompt

from twist_cli.api.errors import TwistError
from twist_cli.config import settings

logger = structlog.get_logger()

TOKEN_HELP = """No Twist API token found.
To get your personal access token:
1. Go to https://twist.com/integrations
2. Create a new integration or select an existing one
3. Copy your personal access token from the OAuth section"""


class AuthenticationError(TwistError):
    """Raised when no API token could be resolved."""


class StoredConfig(BaseModel):
    """Contents of the persisted config file."""

    token: str = ""


def load_stored_config(path: Path | None = None) -> StoredConfig:
    """Load the config file, returning defaults if it is missing or malformed."""
    path = path or settings.config_path
    if not path.exists():
        return StoredConfig()
    try:
        return StoredConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, PydanticValidationError) as e:
        logger.warning("Ignoring unreadable config file", path=str(path), error=str(e))
        return StoredConfig()


def save_token(token: str, path: Path | None = None) -> Path:
    """Persist ``token`` to the config file, readable by the owner only."""
    path = path or settings.config_path
    path.parent.mkdir(parents=True, exist_ok=True)
    config = load_stored_config(path).model_copy(update={"token": token})
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        # O_CREAT's mode only applies to new files
        os.chmod(path, 0o600)
        f.write(config.model_dump_json(indent=2))
    logger.info("Token saved", path=str(path))
    return path


def prompt_for_token(console: Console | None = None) -> str:
    """Ask for a token on the terminal without echoing it."""
    console = console or Console(stderr=True)
    console.print(TOKEN_HELP)
    console.print()
    token = Prompt.ask("Enter your Twist API token", password=True, console=console).strip()
    if not token:
        raise AuthenticationError("token cannot be empty")
    return token


def resolve_token(
    flag_value: str | None = None,
    *,
    interactive: bool | None = None,
    config_path: Path | None = None,
) -> str:
    """Find an API token.

    Priority: explicit flag, ``TWIST_API_TOKEN``, the persisted config file,
    then an interactive prompt whose answer is saved for next time.
    """
    if flag_value:
        return flag_value

    env_token = settings.twist_api_token.get_secret_value()
    if env_token:
        return env_token

    stored = load_stored_config(config_path)
    if stored.token:
        return stored.token

    if interactive is None:
        interactive = sys.stdin.isatty()
    if not interactive:
        raise AuthenticationError(
            "no API token found; pass --token or set TWIST_API_TOKEN"
        )

    token = prompt_for_token()
    save_token(token, config_path)
    return token
