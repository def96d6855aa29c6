"""
Tests for the stdio transport's MCP SDK server.

Handlers are invoked through the SDK's request handler table, the same path
the stdio session uses.
"""

import json

import pytest
from mcp import types

from shopify_mcp.domains import ALL_TOOLS
from shopify_mcp.stdio import build_server


def _call(name: str, arguments: dict) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


class TestStdioServer:
    @pytest.mark.asyncio
    async def test_list_tools(self, adapter, client):
        server = build_server(adapter, client)
        handler = server.request_handlers[types.ListToolsRequest]

        result = await handler(types.ListToolsRequest(method="tools/list"))

        tools = result.root.tools
        assert len(tools) == len(ALL_TOOLS)
        assert tools[0].name == "shopify_test_connection"

    @pytest.mark.asyncio
    async def test_call_tool(self, adapter, client):
        server = build_server(adapter, client)
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(_call("shopify_get_shop", {}))

        call_result = result.root
        assert not call_result.isError
        assert json.loads(call_result.content[0].text)["name"] == "John Smith Test Store"

    @pytest.mark.asyncio
    async def test_failure_reported_as_error(self, adapter, client):
        server = build_server(adapter, client)
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(_call("shopify_get_product", {"productId": 1}))

        call_result = result.root
        assert call_result.isError
        assert "Resource not found" in call_result.content[0].text
