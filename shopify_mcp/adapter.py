"""
Shopify-to-MCP Adapter

Routes MCP JSON-RPC requests to the registered Shopify tools.

The adapter:
1. Holds the registry of tools, built once at startup
2. Answers initialize, tools/list and tools/call
3. Turns every tool failure into an error envelope so the process keeps serving

It holds no tenant state. The Shopify client for the calling tenant is
passed in with each request.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from .client import ShopifyClient
from .domains import ALL_TOOLS
from .errors import ContractViolation, GatewayFailure, ToolValidationError
from .formatters import format_error
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    Tool,
    ToolCallParams,
    ToolCallResult,
    make_error_response,
    make_success_response,
)
from .tools import ToolDefinition

logger = logging.getLogger(__name__)


class ShopifyMcpAdapter:
    """
    Exposes Shopify Admin operations as MCP tools.

    Tools receive only their declared arguments; validation happens before
    any request is sent to Shopify, and nothing is retried.
    """

    def __init__(self, tools: list[ToolDefinition] | None = None):
        self.tools: dict[str, ToolDefinition] = {}

        for tool in ALL_TOOLS if tools is None else tools:
            self.register_tool(tool)

    def register_tool(self, tool: ToolDefinition) -> None:
        if tool.name in self.tools:
            raise ValueError(f"Duplicate tool name: {tool.name}")
        self.tools[tool.name] = tool

    def list_tools(self) -> list[Tool]:
        """Return all registered tools in MCP format."""
        return [tool.to_mcp_tool() for tool in self.tools.values()]

    async def call_tool(
        self, name: str, arguments: dict[str, Any], client: ShopifyClient
    ) -> ToolCallResult:
        """
        Validate arguments and run one tool against ``client``.

        Flow:
        1. Look up tool (error result if unknown)
        2. VALIDATE arguments (raises ToolValidationError)
        3. Run the Shopify operation
        4. Render the result, or the failure envelope

        Raises:
            ToolValidationError: If the arguments do not match the tool's schema.
        """
        tool = self.tools.get(name)
        if tool is None:
            return format_error(ContractViolation(f"Unknown tool: {name}"))

        args = tool.parse_arguments(arguments)

        try:
            return await tool.execute(client, args)
        except GatewayFailure as e:
            logger.warning("Tool %s failed (%s): %s", name, e.failure_category, e)
            return format_error(e)
        except Exception as e:
            logger.exception("Tool %s raised unexpectedly", name)
            return format_error(e)

    async def handle_request(
        self, request: JsonRpcRequest, client: ShopifyClient
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        """
        Single entry point for all MCP operations.

        Supported methods:
            initialize  → server capabilities
            tools/list  → available tools
            tools/call  → execute tool
        """
        match request.method:
            case "initialize":
                return make_success_response(request.id, InitializeResult().model_dump())

            case "tools/list":
                list_result = ListToolsResult(tools=self.list_tools())
                return make_success_response(request.id, list_result.model_dump())

            case "tools/call":
                return await self._handle_tools_call(request, client)

            case _:
                return make_error_response(
                    request.id,
                    ErrorCode.METHOD_NOT_FOUND,
                    f"Unknown method: {request.method}",
                )

    async def _handle_tools_call(
        self, request: JsonRpcRequest, client: ShopifyClient
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        if request.params is None:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                "Missing params for tools/call",
            )

        try:
            params = ToolCallParams(**request.params)
        except ValidationError as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                f"Invalid params: {e}",
            )

        try:
            call_result = await self.call_tool(params.name, params.arguments, client)
        except ToolValidationError as e:
            logger.info("Rejected arguments for %s: %s", e.tool_name, e.errors)
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                str(e),
                data={"tool": e.tool_name, "errors": e.errors},
            )

        return make_success_response(request.id, call_result.model_dump())
