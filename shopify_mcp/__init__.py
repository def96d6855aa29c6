"""Multi-tenant Shopify Admin MCP server package."""

from .adapter import ShopifyMcpAdapter
from .client import NO_CONTENT, HttpMethod, ShopifyClient
from .config import (
    DEFAULT_API_VERSION,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_RETRY_AFTER_SECONDS,
    HTTP_TIMEOUT_SECONDS,
    MAX_PAGE_LIMIT,
    MCP_PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
)
from .credentials import TenantCredentials, credentials_from_env, parse_tenant_credentials
from .domains import ALL_TOOLS
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ContractViolation,
    CredentialsError,
    GatewayFailure,
    RateLimitError,
    ToolValidationError,
    TransportFailure,
    format_error_for_logging,
)
from .formatters import format_error, format_response
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorData,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    TextContent,
    Tool,
    ToolCallParams,
    ToolCallResult,
    ToolInputSchema,
    make_error_response,
    make_success_response,
)
from .pagination import PaginatedResponse, create_paginated_response, parse_link_header
from .tools import ToolArguments, ToolDefinition

__all__ = [
    # Adapter
    "ShopifyMcpAdapter",
    "ToolDefinition",
    "ToolArguments",
    "ALL_TOOLS",
    # Client
    "ShopifyClient",
    "HttpMethod",
    "NO_CONTENT",
    "TenantCredentials",
    "parse_tenant_credentials",
    "credentials_from_env",
    # Pagination & formatting
    "PaginatedResponse",
    "create_paginated_response",
    "parse_link_header",
    "format_response",
    "format_error",
    # Errors
    "GatewayFailure",
    "ContractViolation",
    "ToolValidationError",
    "ApiError",
    "AuthenticationError",
    "RateLimitError",
    "TransportFailure",
    "ConfigurationError",
    "CredentialsError",
    "format_error_for_logging",
    # Config
    "DEFAULT_API_VERSION",
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    "DEFAULT_RETRY_AFTER_SECONDS",
    "HTTP_TIMEOUT_SECONDS",
    "SERVER_NAME",
    "SERVER_VERSION",
    "MCP_PROTOCOL_VERSION",
    # Models
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcErrorResponse",
    "JsonRpcErrorData",
    "Tool",
    "ToolInputSchema",
    "ToolCallParams",
    "ToolCallResult",
    "TextContent",
    "ListToolsResult",
    "InitializeResult",
    "ErrorCode",
    "make_error_response",
    "make_success_response",
]
