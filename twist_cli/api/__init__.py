"""Client for the Twist REST API."""

from twist_cli.api.client import TwistClient
from twist_cli.api.errors import (
    APIConnectionError,
    APIError,
    DecodeError,
    TwistError,
    ValidationError,
)

__all__ = [
    "TwistClient",
    "TwistError",
    "APIConnectionError",
    "APIError",
    "DecodeError",
    "ValidationError",
]
