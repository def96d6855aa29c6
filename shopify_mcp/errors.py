"""
Failure Types

Canonical failure taxonomy for the Shopify MCP server.
Everything the client or a tool raises is an instance of these types, so the
dispatcher can turn any failure into a structured error envelope.
"""

from __future__ import annotations

from typing import Any

from .config import DEFAULT_RETRY_AFTER_SECONDS


class GatewayFailure(Exception):
    """Base class for all server failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ContractViolation(GatewayFailure):
    """
    The request violates MCP protocol requirements.

    - Fatality: Fatal. Request cannot proceed.
    - MCP Representation: JSON-RPC error response with appropriate error code.
    """

    failure_category = "contract_violation"


class ToolValidationError(ContractViolation):
    """Tool arguments did not match the tool's declared schema."""

    def __init__(self, tool_name: str, errors: list[str]) -> None:
        super().__init__(f"Invalid arguments for tool '{tool_name}': {'; '.join(errors)}")
        self.tool_name = tool_name
        self.errors = errors


class ApiError(GatewayFailure):
    """
    Shopify answered with a non-success status.

    - Fatality: Non-fatal to the server.
    - MCP Representation: ToolCallResult with isError: true.

    Server-side failures (5xx) are flagged retryable; the server itself never
    retries, the flag is advice for the caller.
    """

    failure_category = "upstream_failure"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        retryable: bool | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        if retryable is None:
            retryable = status_code is not None and status_code >= 500
        self.retryable = retryable


class AuthenticationError(ApiError):
    """Invalid token (401) or missing access scope (403)."""

    failure_category = "authentication_failure"

    def __init__(self, message: str, status_code: int = 401) -> None:
        super().__init__(message, status_code, retryable=False)


class RateLimitError(ApiError):
    """Shopify throttled the request (429)."""

    failure_category = "rate_limited"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int = DEFAULT_RETRY_AFTER_SECONDS,
    ) -> None:
        super().__init__(message, 429, retryable=True)
        self.retry_after = retry_after


class TransportFailure(GatewayFailure):
    """
    Communication with Shopify failed at the transport layer.

    - Fatality: Fatal to the tool call. The tool cannot complete.
    - MCP Representation: ToolCallResult with isError: true.
    """

    failure_category = "transport_failure"


class ConfigurationError(GatewayFailure):
    """
    The server is misconfigured and cannot operate correctly.

    - Fatality: Fatal. Requests are refused.
    """

    failure_category = "configuration_error"


class CredentialsError(ConfigurationError):
    """Tenant credentials are missing from the request headers or environment."""


def format_error_for_logging(error: BaseException) -> dict[str, Any]:
    """Structured view of a failure, used as the ``details`` of error envelopes."""
    details: dict[str, Any] = {
        "type": type(error).__name__,
        "message": str(error),
    }
    if isinstance(error, GatewayFailure):
        details["category"] = error.failure_category
    if isinstance(error, ApiError):
        details["statusCode"] = error.status_code
        details["retryable"] = error.retryable
    if isinstance(error, RateLimitError):
        details["retryAfter"] = error.retry_after
    return details
