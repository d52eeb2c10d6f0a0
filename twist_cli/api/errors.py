"""Exceptions raised by the Twist API client."""

from typing import Any

import httpx


class TwistError(Exception):
    """Base class for all client errors."""


class APIConnectionError(TwistError):
    """Raised when the request never produced an HTTP response."""


class ValidationError(TwistError):
    """Raised for bad local input, before any request is sent."""


class DecodeError(TwistError):
    """Raised when a 200 response body cannot be decoded."""


class APIError(TwistError):
    """Raised when the service answers with a non-200 status.

    When the body follows the service error shape ``{"error": [code, message, ...]}``
    ``code`` and ``message`` are populated; otherwise only ``status_code`` and the
    raw ``body`` are known.
    """

    def __init__(
        self,
        status_code: int,
        code: Any = None,
        message: str | None = None,
        details: list[Any] | None = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or []
        self.body = body
        super().__init__(str(self))

    @property
    def is_structured(self) -> bool:
        return self.code is not None

    def __str__(self) -> str:
        if self.is_structured:
            if self.message is None:
                return f"API error: {self.code}"
            return f"API error {self.code}: {self.message}"
        return f"API request failed with status {self.status_code}: {self.body}"

    @classmethod
    def from_response(cls, response: httpx.Response) -> "APIError":
        """Classify a non-200 response."""
        body = response.text
        try:
            data = response.json()
        except ValueError:
            data = None

        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, list) and error:
            message = error[1] if len(error) >= 2 else None
            return cls(
                status_code=response.status_code,
                code=error[0],
                message=None if message is None else str(message),
                details=list(error[2:]),
                body=body,
            )
        return cls(status_code=response.status_code, body=body)
