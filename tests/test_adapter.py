"""
Tests for the Shopify-to-MCP adapter.

Tests JSON-RPC routing and failure handling without hitting Shopify.
Uses the mock transport from conftest for isolated testing.
"""

import json

import pytest

from shopify_mcp.adapter import ShopifyMcpAdapter
from shopify_mcp.domains import ALL_TOOLS
from shopify_mcp.errors import ToolValidationError
from shopify_mcp.models import ErrorCode, JsonRpcRequest
from shopify_mcp.tools import ToolArguments, ToolDefinition, raw


class EchoArgs(ToolArguments):
    message: str


def _echo_tool(run=None) -> ToolDefinition:
    async def echo(client, args):
        return {"echo": args.message}

    return ToolDefinition(
        name="echo",
        description="Echo the message back",
        arguments=EchoArgs,
        run=run or echo,
        render=raw,
    )


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------


class TestRegistry:
    def test_defaults_to_all_tools(self, adapter):
        assert len(adapter.tools) == len(ALL_TOOLS)

    def test_list_tools_in_registration_order(self, adapter):
        names = [t.name for t in adapter.list_tools()]
        assert names == [t.name for t in ALL_TOOLS]
        assert names[0] == "shopify_test_connection"

    def test_custom_tools(self):
        adapter = ShopifyMcpAdapter(tools=[_echo_tool()])
        assert list(adapter.tools) == ["echo"]

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValueError, match="Duplicate tool name"):
            ShopifyMcpAdapter(tools=[_echo_tool(), _echo_tool()])


# -----------------------------------------------------------------------------
# call_tool
# -----------------------------------------------------------------------------


class TestCallTool:
    @pytest.mark.asyncio
    async def test_success(self, client):
        adapter = ShopifyMcpAdapter(tools=[_echo_tool()])

        result = await adapter.call_tool("echo", {"message": "hi"}, client)

        assert not result.isError
        assert json.loads(result.text) == {"echo": "hi"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, adapter, client):
        result = await adapter.call_tool("nonexistent", {}, client)

        assert result.isError
        envelope = json.loads(result.text)
        assert envelope["error"] == "Error: Unknown tool: nonexistent"
        assert envelope["details"]["category"] == "contract_violation"

    @pytest.mark.asyncio
    async def test_invalid_arguments_raise(self, client, mock_transport):
        adapter = ShopifyMcpAdapter(tools=[_echo_tool()])

        with pytest.raises(ToolValidationError) as exc_info:
            await adapter.call_tool("echo", {"message": "hi", "extra": 1}, client)

        assert exc_info.value.tool_name == "echo"
        assert mock_transport.requests == []

    @pytest.mark.asyncio
    async def test_shopify_failure_becomes_envelope(self, adapter, client, mock_transport):
        mock_transport.add("GET", "/shop.json", 429, {}, {"Retry-After": "5"})

        result = await adapter.call_tool("shopify_get_shop", {}, client)

        assert result.isError
        envelope = json.loads(result.text)
        assert envelope["error"] == "Error: Rate limit exceeded (retryable)"
        assert envelope["details"]["retryAfter"] == 5

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_envelope(self, client):
        async def broken(client, args):
            raise KeyError("count")

        adapter = ShopifyMcpAdapter(tools=[_echo_tool(run=broken)])

        result = await adapter.call_tool("echo", {"message": "hi"}, client)

        assert result.isError
        assert json.loads(result.text)["details"]["type"] == "KeyError"


# -----------------------------------------------------------------------------
# handle_request
# -----------------------------------------------------------------------------


class TestHandleRequest:
    @pytest.mark.asyncio
    async def test_initialize(self, adapter, client):
        request = JsonRpcRequest(id=1, method="initialize")

        response = await adapter.handle_request(request, client)

        assert response.id == 1
        assert response.result["protocolVersion"] == "2024-11-05"
        assert response.result["serverInfo"]["name"] == "shopify-mcp-server"
        assert "capabilities" in response.result

    @pytest.mark.asyncio
    async def test_tools_list(self, adapter, client):
        request = JsonRpcRequest(id=2, method="tools/list")

        response = await adapter.handle_request(request, client)

        assert response.id == 2
        assert len(response.result["tools"]) == len(ALL_TOOLS)
        first = response.result["tools"][0]
        assert set(first) == {"name", "description", "inputSchema"}

    @pytest.mark.asyncio
    async def test_tools_call(self, adapter, client):
        request = JsonRpcRequest(
            id=3,
            method="tools/call",
            params={"name": "shopify_get_shop", "arguments": {}},
        )

        response = await adapter.handle_request(request, client)

        assert response.id == 3
        assert response.result["isError"] is False
        shop = json.loads(response.result["content"][0]["text"])
        assert shop["name"] == "John Smith Test Store"

    @pytest.mark.asyncio
    async def test_tools_call_without_arguments(self, adapter, client):
        request = JsonRpcRequest(
            id=4, method="tools/call", params={"name": "shopify_test_connection"}
        )

        response = await adapter.handle_request(request, client)

        assert response.result["isError"] is False

    @pytest.mark.asyncio
    async def test_invalid_arguments_are_invalid_params(self, adapter, client):
        request = JsonRpcRequest(
            id=5,
            method="tools/call",
            params={"name": "shopify_get_product", "arguments": {"productId": "abc"}},
        )

        response = await adapter.handle_request(request, client)

        assert response.error.code == ErrorCode.INVALID_PARAMS.value
        assert response.error.data["tool"] == "shopify_get_product"
        assert response.error.data["errors"]

    @pytest.mark.asyncio
    async def test_unknown_method(self, adapter, client):
        request = JsonRpcRequest(id=6, method="unknown/method")

        response = await adapter.handle_request(request, client)

        assert response.error.code == -32601  # METHOD_NOT_FOUND

    @pytest.mark.asyncio
    async def test_missing_params(self, adapter, client):
        request = JsonRpcRequest(id=7, method="tools/call", params=None)

        response = await adapter.handle_request(request, client)

        assert response.error.code == -32602  # INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_params_without_name(self, adapter, client):
        request = JsonRpcRequest(id=8, method="tools/call", params={"arguments": {}})

        response = await adapter.handle_request(request, client)

        assert response.error.code == -32602
        assert response.error.message.startswith("Invalid params")

    @pytest.mark.asyncio
    async def test_tool_failure_is_result_not_rpc_error(self, adapter, client):
        request = JsonRpcRequest(
            id=9,
            method="tools/call",
            params={"name": "shopify_get_product", "arguments": {"productId": 1}},
        )

        response = await adapter.handle_request(request, client)

        assert not hasattr(response, "error")
        assert response.result["isError"] is True
