"""Unit tests for the transport core."""

import httpx
import pytest

from tests.mock_service import BASE_URL, make_client
from twist_cli.api import (
    APIConnectionError,
    APIError,
    DecodeError,
    TwistClient,
    ValidationError,
)
from twist_cli.schemas import Channel, Workspace


class TestRequestConstruction:
    """Tests for how requests are built."""

    def test_bearer_token_on_every_request(self, client, service):
        """Test that the token is sent as a bearer Authorization header."""
        service.add("GET", "/workspaces/get", [])
        service.add("POST", "/channels/archive", {})

        client.workspaces.list_workspaces()
        client.channels.archive_channel(3)

        assert [r.headers["Authorization"] for r in service.requests] == [
            "Bearer test-token",
            "Bearer test-token",
        ]

    def test_paths_are_relative_to_base_url(self, client, service):
        """Test that endpoint paths are joined onto the base URL."""
        service.add("GET", "/workspaces/get", [])

        client.workspaces.list_workspaces()

        assert str(service.requests[0].url) == f"{BASE_URL}/workspaces/get"

    def test_reads_use_query_parameters(self, client, service):
        """Test that read endpoints pass their arguments as a query string."""
        service.add("GET", "/channels/getone", {"id": 5, "name": "general"})

        client.channels.get_channel(5)

        request = service.requests[0]
        assert request.method == "GET"
        assert service.params() == {"id": "5"}
        assert request.content == b""

    def test_writes_send_json(self, client, service):
        """Test that write endpoints send a JSON body."""
        service.add("POST", "/channels/archive", {})

        client.channels.archive_channel(12)

        request = service.requests[0]
        assert request.headers["Content-Type"] == "application/json"
        assert service.payload() == {"id": 12}

    def test_empty_token_rejected(self):
        """Test that a client cannot be built without a token."""
        with pytest.raises(ValidationError):
            TwistClient("")

    def test_context_manager_closes_client(self, service):
        """Test that leaving the context closes the HTTP client."""
        with make_client(service) as c:
            pass
        assert c._client.is_closed


class TestResponseDecoding:
    """Tests for decoding successful responses."""

    def test_decodes_typed_list(self, client, service):
        """Test decoding a list response into models."""
        service.add(
            "GET",
            "/workspaces/get",
            [
                {"id": 1, "name": "Acme", "creator": 9, "created_ts": 1700000000, "plan": "free"},
                {"id": 2, "name": "Beta", "plan": "unlimited"},
            ],
        )

        workspaces = client.workspaces.list_workspaces()

        assert workspaces == [
            Workspace(id=1, name="Acme", creator=9, created_ts=1700000000, plan="free"),
            Workspace(id=2, name="Beta", plan="unlimited"),
        ]

    def test_ignores_unknown_fields(self, client, service):
        """Test that extra keys in a response are ignored."""
        service.add("GET", "/channels/getone", {"id": 5, "name": "general", "extra": [1, 2]})

        channel = client.channels.get_channel(5)

        assert channel == Channel(id=5, name="general")

    def test_discarded_body_is_not_decoded(self, client, service):
        """Test that fire-and-forget calls accept any 200 body."""
        service.add("POST", "/threads/pin", content="ok")

        assert client.threads.pin_thread(1) is None

    def test_null_list_decodes_empty(self, client, service):
        """Test that a null body from a list endpoint is an empty list."""
        service.add("GET", "/channels/get", content="null")

        assert client.channels.list_channels(100) == []

    def test_null_object_raises_decode_error(self, client, service):
        """Test that a null body for a single resource is still rejected."""
        service.add("GET", "/channels/getone", content="null")

        with pytest.raises(DecodeError):
            client.channels.get_channel(5)

    def test_malformed_json_raises_decode_error(self, client, service):
        """Test that an undecodable 200 body raises DecodeError."""
        service.add("GET", "/channels/get", content="{not json")

        with pytest.raises(DecodeError):
            client.channels.list_channels(100)

    def test_wrong_shape_raises_decode_error(self, client, service):
        """Test that a 200 body of the wrong shape raises DecodeError."""
        service.add("GET", "/channels/get", {"id": 1})

        with pytest.raises(DecodeError):
            client.channels.list_channels(100)


class TestErrorClassification:
    """Tests for mapping failed exchanges onto typed errors."""

    def test_structured_error_body(self, client, service):
        """Test that the service error shape yields code and message."""
        service.add("GET", "/channels/get", {"error": [42, "bad thing"]}, status_code=400)

        with pytest.raises(APIError) as exc_info:
            client.channels.list_channels(100)

        error = exc_info.value
        assert error.code == 42
        assert error.message == "bad thing"
        assert error.status_code == 400
        assert str(error) == "API error 42: bad thing"

    def test_structured_error_keeps_extra_items(self, client, service):
        """Test that additional error list items are kept as details."""
        service.add(
            "GET",
            "/channels/get",
            {"error": [200, "Invalid argument value", {"argument": "workspace_id"}]},
            status_code=400,
        )

        with pytest.raises(APIError) as exc_info:
            client.channels.list_channels(100)

        assert exc_info.value.details == [{"argument": "workspace_id"}]

    def test_unparseable_error_body(self, client, service):
        """Test that a non-JSON error body keeps the raw status and text."""
        service.add("GET", "/channels/get", content="not json", status_code=502)

        with pytest.raises(APIError) as exc_info:
            client.channels.list_channels(100)

        error = exc_info.value
        assert error.code is None
        assert error.status_code == 502
        assert error.body == "not json"
        assert str(error) == "API request failed with status 502: not json"

    def test_json_error_without_error_key(self, client, service):
        """Test that JSON bodies not matching the error shape fall back to raw text."""
        service.add("GET", "/channels/get", {"detail": "nope"}, status_code=500)

        with pytest.raises(APIError) as exc_info:
            client.channels.list_channels(100)

        assert exc_info.value.code is None
        assert exc_info.value.status_code == 500
        assert "nope" in exc_info.value.body

    def test_non_200_success_codes_are_errors(self, client, service):
        """Test that only a 200 counts as success."""
        service.add("POST", "/channels/archive", {}, status_code=204)

        with pytest.raises(APIError):
            client.channels.archive_channel(1)

    def test_transport_failure_raises_connection_error(self):
        """Test that transport failures are not mistaken for API errors."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = TwistClient("t", base_url=BASE_URL, transport=httpx.MockTransport(refuse))

        with pytest.raises(APIConnectionError, match="connection refused"):
            client.workspaces.list_workspaces()

    def test_timeout_raises_connection_error(self):
        """Test that timeouts are classified as connection errors."""

        def hang(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = TwistClient("t", base_url=BASE_URL, transport=httpx.MockTransport(hang))

        with pytest.raises(APIConnectionError):
            client.channels.get_channel(1)
