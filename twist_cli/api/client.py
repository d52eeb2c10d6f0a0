"""Transport core for the Twist REST API."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TypeVar, get_origin

import httpx
import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from twist_cli.api.attachments import AttachmentsAPI
from twist_cli.api.channels import ChannelsAPI
from twist_cli.api.conversations import ConversationsAPI
from twist_cli.api.errors import APIConnectionError, APIError, DecodeError, ValidationError
from twist_cli.api.groups import GroupsAPI
from twist_cli.api.reactions import ReactionsAPI
from twist_cli.api.search import SearchAPI
from twist_cli.api.threads import CommentsAPI, ThreadsAPI
from twist_cli.api.workspaces import UsersAPI, WorkspacesAPI
from twist_cli.config import settings

logger = structlog.get_logger()

T = TypeVar("T")


def decode(content: bytes, response_type: Any) -> Any:
    """Decode a JSON body into ``response_type``.

    A ``null`` body decodes to an empty list for list endpoints.
    """
    if get_origin(response_type) is list and content.strip() == b"null":
        return []
    try:
        return TypeAdapter(response_type).validate_json(content)
    except PydanticValidationError as e:
        raise DecodeError(f"failed to parse response: {e}") from e


class TwistClient:
    """Synchronous client for the Twist API.

    Every request carries the bearer token given at construction. Resource
    operations live on the family attributes (``client.channels``,
    ``client.threads`` and so on) and all funnel through :meth:`request`.
    """

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        if not token:
            raise ValidationError("API token must not be empty")

        self.base_url = (base_url or settings.twist_api_base_url).rstrip("/")
        self._timeout = settings.request_timeout if timeout is None else timeout
        self._transport = transport
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=self._timeout,
            transport=transport,
        )

        self.workspaces = WorkspacesAPI(self)
        self.users = UsersAPI(self)
        self.channels = ChannelsAPI(self)
        self.threads = ThreadsAPI(self)
        self.comments = CommentsAPI(self)
        self.conversations = ConversationsAPI(self)
        self.groups = GroupsAPI(self)
        self.reactions = ReactionsAPI(self)
        self.attachments = AttachmentsAPI(self)
        self.search = SearchAPI(self)

    def __enter__(self) -> "TwistClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        response_type: type[T] | Any = None,
    ) -> T | None:
        """Execute one authenticated request and decode the result.

        Reads pass ``params``; writes pass ``json``; uploads pass ``files``
        and ``data``. With ``response_type=None`` the body is discarded.
        """
        log = logger.bind(method=method, path=path)
        try:
            response = self._client.request(
                method,
                path,
                params=params,
                json=json,
                data=data,
                files=files,
            )
        except httpx.TransportError as e:
            log.debug("Twist request failed", error=str(e))
            raise APIConnectionError(f"failed to execute request: {e}") from e

        log.debug("Twist request completed", status=response.status_code)

        if response.status_code != httpx.codes.OK:
            raise APIError.from_response(response)

        if response_type is None:
            return None
        return decode(response.content, response_type)

    def get(self, path: str, response_type: type[T] | Any, **params: Any) -> T:
        """GET ``path`` with the non-None keyword arguments as query string."""
        query = {key: value for key, value in params.items() if value is not None}
        return self.request("GET", path, params=query, response_type=response_type)

    def post(
        self,
        path: str,
        payload: dict[str, Any],
        response_type: type[T] | Any = None,
    ) -> T | None:
        """POST ``payload`` as JSON to ``path``."""
        return self.request("POST", path, json=payload, response_type=response_type)

    @contextmanager
    def stream_unauthenticated(self, url: str) -> Iterator[httpx.Response]:
        """Open a streamed GET against an absolute URL without credentials."""
        with httpx.Client(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                with client.stream("GET", url) as response:
                    logger.debug("Download started", status=response.status_code)
                    if response.status_code != httpx.codes.OK:
                        response.read()
                        raise APIError(
                            status_code=response.status_code,
                            body=response.text,
                        )
                    yield response
            except httpx.TransportError as e:
                raise APIConnectionError(f"failed to download file: {e}") from e
