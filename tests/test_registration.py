import json
import logging

import pytest
from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

from carehelper.mcp.servers.carepartner_mcp_server.server import create_mcp_server
from carehelper.mcp.servers.carepartner_mcp_server.tools.care_jobs import (
    TOOL_NAME,
    register_search_care_jobs_tool,
)

from .helpers import completion, json_response, transport_returning

GATE_LOGGER = "carehelper.mcp.servers.carepartner_mcp_server.tools.care_jobs"


def _gate_warnings(caplog):
    return [r for r in caplog.records if r.name == GATE_LOGGER and r.levelno == logging.WARNING]


@pytest.mark.asyncio
async def test_missing_key_registers_nothing(caplog):
    mcp = FastMCP("test")
    with caplog.at_level(logging.WARNING):
        assert register_search_care_jobs_tool(mcp, environ={}) is False

    assert TOOL_NAME not in await mcp.get_tools()
    warnings = _gate_warnings(caplog)
    assert len(warnings) == 1
    assert "OPENROUTER_API_KEY" in warnings[0].getMessage()
    assert TOOL_NAME in warnings[0].getMessage()


@pytest.mark.asyncio
async def test_blank_key_counts_as_missing(caplog):
    mcp = FastMCP("test")
    with caplog.at_level(logging.WARNING):
        assert register_search_care_jobs_tool(mcp, environ={"OPENROUTER_API_KEY": "   "}) is False
    assert await mcp.get_tools() == {}
    assert len(_gate_warnings(caplog)) == 1


@pytest.mark.asyncio
async def test_key_present_registers_one_tool(caplog):
    mcp = FastMCP("test")
    with caplog.at_level(logging.WARNING):
        assert register_search_care_jobs_tool(mcp, environ={"OPENROUTER_API_KEY": "sk-or-x"}) is True

    tools = await mcp.get_tools()
    assert list(tools) == [TOOL_NAME]
    assert "carepartner.kr" in tools[TOOL_NAME].description
    schema = tools[TOOL_NAME].parameters
    assert schema["required"] == ["location"]
    assert schema["properties"]["location"]["type"] == "string"
    assert schema["properties"]["location"]["minLength"] == 1
    assert _gate_warnings(caplog) == []


@pytest.mark.asyncio
async def test_server_without_key_only_has_ping():
    mcp = create_mcp_server(environ={})
    assert set(await mcp.get_tools()) == {"ping"}

    async with Client(mcp) as client:
        with pytest.raises(ToolError):
            await client.call_tool(TOOL_NAME, {"location": "Seoul"})


@pytest.mark.asyncio
async def test_call_through_mcp_client():
    seen = []
    transport = transport_returning(json_response(200, completion("1. Title...")), seen)
    mcp = create_mcp_server(environ={"OPENROUTER_API_KEY": "sk-or-abc"}, transport=transport)

    async with Client(mcp) as client:
        result = await client.call_tool(TOOL_NAME, {"location": "서울 강남구"})

    assert result.content[0].text == "1. Title..."
    assert json.loads(seen[0].content)["messages"][1]["content"].count("서울 강남구") == 1


@pytest.mark.asyncio
async def test_failure_is_an_ordinary_result_through_mcp_client():
    transport = transport_returning(json_response(200, {}))
    mcp = create_mcp_server(environ={"OPENROUTER_API_KEY": "sk-or-abc"}, transport=transport)

    async with Client(mcp) as client:
        result = await client.call_tool(TOOL_NAME, {"location": "Seoul"})

    assert result.is_error is False
    assert result.content[0].text.startswith("Sorry, something went wrong")


@pytest.mark.asyncio
async def test_empty_location_rejected_before_handler():
    seen = []
    transport = transport_returning(json_response(200, completion("unused")), seen)
    mcp = create_mcp_server(environ={"OPENROUTER_API_KEY": "sk-or-abc"}, transport=transport)

    async with Client(mcp) as client:
        with pytest.raises(ToolError):
            await client.call_tool(TOOL_NAME, {"location": ""})
    assert seen == []


@pytest.mark.asyncio
async def test_key_captured_at_registration():
    seen = []
    environ = {"OPENROUTER_API_KEY": "sk-or-first"}
    transport = transport_returning(json_response(200, completion("ok")), seen)
    mcp = create_mcp_server(environ=environ, transport=transport)
    environ["OPENROUTER_API_KEY"] = "sk-or-second"

    async with Client(mcp) as client:
        await client.call_tool(TOOL_NAME, {"location": "Seoul"})

    assert seen[0].headers["Authorization"] == "Bearer sk-or-first"


@pytest.mark.asyncio
async def test_ping():
    async with Client(create_mcp_server(environ={})) as client:
        result = await client.call_tool("ping", {})
    assert result.data["status"] == "ok"


@pytest.mark.asyncio
async def test_server_loads_key_from_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("OPENROUTER_API_KEY=sk-or-fromdotenv\n")
    monkeypatch.chdir(tmp_path)

    mcp = create_mcp_server()

    assert TOOL_NAME in await mcp.get_tools()


@pytest.mark.asyncio
async def test_shell_key_wins_over_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("OPENROUTER_API_KEY=sk-or-fromdotenv\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-shell")
    seen = []
    transport = transport_returning(json_response(200, completion("ok")), seen)

    async with Client(create_mcp_server(transport=transport)) as client:
        await client.call_tool(TOOL_NAME, {"location": "Seoul"})

    assert seen[0].headers["Authorization"] == "Bearer sk-or-shell"
