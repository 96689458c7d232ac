import pytest

from carehelper.mcp.servers.carepartner_mcp_server.config import CareJobsConfig


@pytest.fixture
def config():
    return CareJobsConfig(api_key="sk-or-v1-test")


@pytest.fixture(autouse=True)
def _no_ambient_key(monkeypatch):
    # A developer's .env must not leak into tests. setenv first so teardown
    # also removes a key a test loads from a .env file.
    monkeypatch.setenv("OPENROUTER_API_KEY", "")
    monkeypatch.delenv("OPENROUTER_API_KEY")
