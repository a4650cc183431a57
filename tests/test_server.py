"""End-to-end server tests."""

import pytest
import json

from funclist_mcp.server import server, list_tools, call_tool


@pytest.mark.asyncio
async def test_server_lists_three_tools():
    """Test that server lists all 3 tools."""
    tools = await list_tools()

    assert len(tools) == 3

    names = {t.name for t in tools}
    expected = {"get_function_list", "get_file_function_list", "list_languages"}
    assert names == expected


@pytest.mark.asyncio
async def test_get_function_list_tool_schema():
    """Test get_function_list tool has correct schema."""
    tools = await list_tools()

    tool = next(t for t in tools if t.name == "get_function_list")

    props = tool.inputSchema["properties"]
    assert "source" in props
    assert "language" in props
    assert "nested" in props
    assert tool.inputSchema["required"] == ["source"]
    assert set(props["language"]["enum"]) == {"javascript", "typescript", "tsx"}


@pytest.mark.asyncio
async def test_call_get_function_list():
    """Test calling the outline tool returns JSON."""
    content = await call_tool("get_function_list", {"source": "function* gen(a = 1) {}"})

    result = json.loads(content[0].text)
    assert result["count"] == 1
    assert result["functions"][0]["category"] == "generator"
    assert result["functions"][0]["args"] == ["a=1"]


@pytest.mark.asyncio
async def test_call_unknown_tool():
    """Test unknown tools return an error payload."""
    content = await call_tool("no_such_tool", {})

    result = json.loads(content[0].text)
    assert "error" in result


@pytest.mark.asyncio
async def test_call_tool_missing_argument():
    """Test missing required arguments return an error payload."""
    content = await call_tool("get_function_list", {})

    result = json.loads(content[0].text)
    assert "error" in result
