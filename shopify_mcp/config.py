"""
Centralized configuration for the Shopify MCP server.

All magic values, header names, and limits in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os

# -----------------------------------------------------------------------------
# Shopify Admin API
# -----------------------------------------------------------------------------

DEFAULT_API_VERSION = os.environ.get("SHOPIFY_DEFAULT_API_VERSION", "2024-01")

ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"
SHOP_DOMAIN_HEADER = "X-Shopify-Shop-Domain"
API_VERSION_HEADER = "X-Shopify-API-Version"

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = float(os.environ.get("SHOPIFY_HTTP_TIMEOUT", "30.0"))

# Seconds to wait when a 429 arrives without a Retry-After header
DEFAULT_RETRY_AFTER_SECONDS = 60

# -----------------------------------------------------------------------------
# Pagination
# -----------------------------------------------------------------------------

DEFAULT_PAGE_LIMIT = 50
MAX_PAGE_LIMIT = 250

# -----------------------------------------------------------------------------
# Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "shopify-mcp-server"
SERVER_VERSION = "1.0.0"
MCP_PROTOCOL_VERSION = "2024-11-05"

SERVER_HOST = os.environ.get("SHOPIFY_MCP_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("SHOPIFY_MCP_PORT", "8000"))

LOG_LEVEL = os.environ.get("SHOPIFY_MCP_LOG_LEVEL", "INFO")
