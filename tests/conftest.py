"""Pytest fixtures and configuration."""

import pytest
from pydantic import SecretStr
from typer.testing import CliRunner

from tests.mock_service import TOKEN, MockTwistService, make_client
from twist_cli.cli.main import app, configure_logging
from twist_cli.config import settings


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep log output off stdout during tests."""
    configure_logging("WARNING")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Never read a real token or config file."""
    monkeypatch.setattr(settings, "twist_api_token", SecretStr(""))
    monkeypatch.setattr(settings, "config_path", tmp_path / "twist" / "config.json")


@pytest.fixture
def service() -> MockTwistService:
    return MockTwistService()


@pytest.fixture
def client(service):
    """Client wired to the mock service."""
    with make_client(service) as c:
        yield c


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli(runner, service, monkeypatch):
    """Invoke the CLI against the mock service."""
    monkeypatch.setattr(
        "twist_cli.cli.context.build_client",
        lambda token: make_client(service, token),
    )

    def invoke(*args: str):
        return runner.invoke(app, ["--token", TOKEN, *args])

    return invoke
