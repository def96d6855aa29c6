"""
stdio MCP Server

Single-tenant transport for local MCP clients (desktop apps, IDEs) that
launch the server as a subprocess. Credentials come from the environment:

    SHOPIFY_ACCESS_TOKEN  Admin API access token (required)
    SHOPIFY_SHOP_DOMAIN   e.g. mystore.myshopify.com (required)
    SHOPIFY_API_VERSION   defaults to the configured API version

stdout carries the protocol, so logs go to stderr.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .adapter import ShopifyMcpAdapter
from .client import ShopifyClient
from .config import SERVER_NAME, SERVER_VERSION
from .credentials import credentials_from_env
from .errors import CredentialsError
from .log import setup_logging

logger = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """A tool returned its failure envelope; the SDK reports it with isError set."""


def build_server(adapter: ShopifyMcpAdapter, client: ShopifyClient) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema.model_dump(),
            )
            for tool in adapter.list_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await adapter.call_tool(name, arguments or {}, client)
        if result.isError:
            raise ToolCallFailed(result.text)
        return [types.TextContent(type="text", text=block.text) for block in result.content]

    return server


async def serve() -> None:
    credentials = credentials_from_env()
    adapter = ShopifyMcpAdapter()
    logger.info("Serving %d tools for %s over stdio", len(adapter.tools), credentials.shop_domain)

    async with ShopifyClient(credentials) as client:
        server = build_server(adapter, client)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    setup_logging()
    try:
        asyncio.run(serve())
    except CredentialsError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
