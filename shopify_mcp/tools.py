"""
Tool definitions for the Shopify MCP server.

This module contains:
- Core types: ToolArguments, ToolDefinition
- Render helpers shared by every domain (formatted, mutated, deleted, counted)

Domain-specific tools live in the domains/ package and are aggregated in
``shopify_mcp.domains.ALL_TOOLS``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .client import ShopifyClient
from .config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from .errors import ToolValidationError
from .formatters import format_response, to_json
from .models import TextContent, Tool, ToolCallResult, ToolInputSchema


# -----------------------------------------------------------------------------
# Argument Models
# -----------------------------------------------------------------------------


class ToolArguments(BaseModel):
    """
    Base for tool argument schemas.

    Fields are declared in snake_case and exposed to MCP clients in camelCase.
    Unknown arguments are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def payload(self, *exclude: str) -> dict[str, Any]:
        """camelCase dict of the set fields, minus ``format`` and ``exclude``."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"format", *exclude},
        )


class FormattedArguments(ToolArguments):
    format: Literal["json", "markdown"] = Field(
        default="json", description="Response format"
    )


class PageArguments(FormattedArguments):
    limit: int = Field(
        default=DEFAULT_PAGE_LIMIT,
        ge=1,
        le=MAX_PAGE_LIMIT,
        description="Number of results to return",
    )


# -----------------------------------------------------------------------------
# Tool Definition
# -----------------------------------------------------------------------------

Runner = Callable[[ShopifyClient, Any], Awaitable[Any]]
Renderer = Callable[[Any, Any], ToolCallResult]


@dataclass
class ToolDefinition:
    """
    One MCP tool backed by a Shopify operation.

    - name: Tool name (``shopify_<verb>_<resource>``)
    - description: Human-readable description for LLM agents
    - arguments: pydantic model validating the call arguments
    - run: awaits the Shopify operation with validated arguments
    - render: turns the operation result into a ToolCallResult
    """

    name: str
    description: str
    arguments: type[ToolArguments]
    run: Runner
    render: Renderer

    def parse_arguments(self, arguments: dict[str, Any]) -> ToolArguments:
        """
        Validate raw call arguments.

        Raises:
            ToolValidationError: If arguments are missing, unknown, or mistyped.
        """
        try:
            return self.arguments.model_validate(arguments)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            raise ToolValidationError(self.name, errors) from e

    async def execute(self, client: ShopifyClient, arguments: ToolArguments) -> ToolCallResult:
        result = await self.run(client, arguments)
        return self.render(result, arguments)

    def to_mcp_tool(self) -> Tool:
        """Convert this definition to an MCP Tool."""
        schema = self.arguments.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=ToolInputSchema(**schema),
        )


# -----------------------------------------------------------------------------
# Render Helpers
# -----------------------------------------------------------------------------


def json_result(data: Any) -> ToolCallResult:
    return ToolCallResult(content=[TextContent(text=to_json(data))])


def formatted(entity_type: str) -> Renderer:
    """Render in the caller's requested format under ``entity_type``."""

    def render(result: Any, args: Any) -> ToolCallResult:
        return format_response(result, args.format, entity_type)

    return render


def mutated(message: str, key: str) -> Renderer:
    """``{"success": true, "message": ..., key: result}``."""

    def render(result: Any, args: Any) -> ToolCallResult:
        return json_result({"success": True, "message": message, key: result})

    return render


def deleted(template: str) -> Renderer:
    """Success message built from the arguments, e.g. ``"Product {product_id} deleted"``."""

    def render(result: Any, args: Any) -> ToolCallResult:
        return json_result({"success": True, "message": template.format_map(args.model_dump())})

    return render


def counted(result: Any, args: Any) -> ToolCallResult:
    return json_result({"count": result})


def raw(result: Any, args: Any) -> ToolCallResult:
    return json_result(result)
