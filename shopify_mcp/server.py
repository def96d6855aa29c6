"""
MCP Server

FastAPI application exposing the Shopify tools as a multi-tenant MCP server.
Handles JSON-RPC 2.0 over HTTP POST.

The server is stateless: every request to /mcp carries the tenant's shop
domain and access token in headers, and gets its own Shopify client for the
duration of that request.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .adapter import ShopifyMcpAdapter
from .client import ShopifyClient
from .config import (
    ACCESS_TOKEN_HEADER,
    API_VERSION_HEADER,
    DEFAULT_API_VERSION,
    SERVER_HOST,
    SERVER_NAME,
    SERVER_PORT,
    SERVER_VERSION,
    SHOP_DOMAIN_HEADER,
)
from .credentials import REQUIRED_HEADERS, parse_tenant_credentials
from .errors import CredentialsError
from .log import setup_logging
from .models import ErrorCode, JsonRpcRequest, make_error_response

logger = logging.getLogger(__name__)


def create_app(
    adapter: ShopifyMcpAdapter | None = None,
    shopify_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    ``shopify_transport`` replaces the network transport of every per-request
    Shopify client; tests use it to answer with canned responses.
    """
    mcp_adapter = adapter or ShopifyMcpAdapter()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("%s %s serving %d tools", SERVER_NAME, SERVER_VERSION, len(mcp_adapter.tools))
        yield

    app = FastAPI(
        title="Shopify MCP Server",
        description="Multi-tenant MCP server for the Shopify Admin REST API.",
        version=SERVER_VERSION,
        lifespan=lifespan,
    )
    app.state.adapter = mcp_adapter

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> JSONResponse:
        """
        Main MCP endpoint accepting JSON-RPC 2.0 requests.

        Tenant credentials are required before anything else is looked at.
        """
        try:
            credentials = parse_tenant_credentials(request.headers)
        except CredentialsError as e:
            return JSONResponse(
                content={
                    "error": "Unauthorized",
                    "message": e.message,
                    "required_headers": REQUIRED_HEADERS,
                },
                status_code=401,
            )

        # Parse raw JSON to handle malformed requests gracefully
        try:
            body = await request.json()
        except ValueError:
            error = make_error_response(None, ErrorCode.PARSE_ERROR, "Invalid JSON")
            return JSONResponse(content=error.model_dump(), status_code=200)

        # Validate as JSON-RPC request
        try:
            rpc_request = JsonRpcRequest(**body)
        except (TypeError, ValidationError) as e:
            error = make_error_response(
                body.get("id") if isinstance(body, dict) else None,
                ErrorCode.INVALID_REQUEST,
                f"Invalid request: {e}",
            )
            return JSONResponse(content=error.model_dump(), status_code=200)

        async with ShopifyClient(credentials, transport=shopify_transport) as client:
            response = await mcp_adapter.handle_request(rpc_request, client)
        return JSONResponse(content=response.model_dump(), status_code=200)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "server": SERVER_NAME}

    @app.get("/tools")
    async def list_tools() -> dict[str, Any]:
        """
        Convenience endpoint to list available tools.

        Not part of MCP - useful for debugging and exploration.
        MCP clients use the tools/list method instead.
        """
        return {"tools": [t.model_dump() for t in mcp_adapter.list_tools()]}

    @app.get("/")
    async def info() -> dict[str, Any]:
        return {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "description": "Multi-tenant Shopify MCP Server",
            "endpoints": {
                "mcp": "/mcp (POST) - JSON-RPC MCP endpoint",
                "health": "/health - Health check",
                "tools": "/tools - Tool listing",
            },
            "authentication": {
                "description": "Pass tenant credentials via request headers",
                "required_headers": {
                    ACCESS_TOKEN_HEADER: "Shopify Admin API access token",
                    SHOP_DOMAIN_HEADER: "Shop domain (e.g., mystore.myshopify.com)",
                },
                "optional_headers": {
                    API_VERSION_HEADER: f"API version (defaults to {DEFAULT_API_VERSION})",
                },
            },
            "available_tools": list(mcp_adapter.tools),
        }

    return app


app = create_app()


def main() -> None:
    import uvicorn

    setup_logging()
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    main()
