"""
Themes Domain

Online store themes and the files (assets) inside them. Assets are
addressed by key, which is the file path within the theme, e.g.
``templates/index.liquid``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ..client import ShopifyClient
from ..pagination import PaginatedResponse, wrap_items
from ..tools import (
    FormattedArguments,
    ToolArguments,
    ToolDefinition,
    deleted,
    formatted,
    mutated,
)


def _asset_params(key: str) -> dict[str, str]:
    return {"asset[key]": key}


async def list_themes(client: ShopifyClient) -> list[dict[str, Any]]:
    return await client.list_all("/themes.json", "themes")


async def get_theme(client: ShopifyClient, theme_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/themes/{theme_id}.json", "theme")


async def create_theme(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/themes.json", "theme", data)


async def update_theme(
    client: ShopifyClient, theme_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(f"/themes/{theme_id}.json", "theme", data)


async def delete_theme(client: ShopifyClient, theme_id: int) -> None:
    await client.delete_resource(f"/themes/{theme_id}.json")


async def list_assets(client: ShopifyClient, theme_id: int) -> list[dict[str, Any]]:
    return await client.list_all(f"/themes/{theme_id}/assets.json", "assets")


async def get_asset(client: ShopifyClient, theme_id: int, key: str) -> dict[str, Any]:
    return await client.get_resource(
        f"/themes/{theme_id}/assets.json", "asset", params=_asset_params(key)
    )


async def create_or_update_asset(
    client: ShopifyClient, theme_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    """Write an asset from ``value``, base64 ``attachment`` or a ``sourceKey`` copy."""
    return await client.update_resource(f"/themes/{theme_id}/assets.json", "asset", data)


async def delete_asset(client: ShopifyClient, theme_id: int, key: str) -> None:
    await client.delete_resource(f"/themes/{theme_id}/assets.json", params=_asset_params(key))


class ThemeIdArgs(FormattedArguments):
    theme_id: int = Field(description="Theme ID")


class CreateThemeArgs(ToolArguments):
    name: str = Field(description="Theme name")
    src: str | None = Field(default=None, description="URL of a zip file to install from")
    role: Literal["main", "unpublished"] | None = Field(
        default=None, description="'main' publishes the theme immediately"
    )


class UpdateThemeArgs(ToolArguments):
    theme_id: int
    name: str | None = None
    role: Literal["main", "unpublished"] | None = None


class DeleteThemeArgs(ToolArguments):
    theme_id: int


class AssetKeyArgs(FormattedArguments):
    theme_id: int
    key: str = Field(description="Asset key (file path)")


class SaveAssetArgs(ToolArguments):
    theme_id: int
    key: str = Field(description="Asset key (file path)")
    value: str | None = Field(default=None, description="Text content")
    attachment: str | None = Field(default=None, description="Base64 encoded binary content")
    source_key: str | None = Field(default=None, description="Copy from this asset key")


class DeleteAssetArgs(ToolArguments):
    theme_id: int
    key: str


async def _assets_page(client: ShopifyClient, theme_id: int) -> PaginatedResponse:
    return wrap_items(await list_assets(client, theme_id))


THEME_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_themes",
        description="List all themes in the store with their roles (main, unpublished, demo).",
        arguments=FormattedArguments,
        run=lambda client, args: list_themes(client),
        render=formatted("themes"),
    ),
    ToolDefinition(
        name="shopify_get_theme",
        description="Get a single theme by ID.",
        arguments=ThemeIdArgs,
        run=lambda client, args: get_theme(client, args.theme_id),
        render=formatted("theme"),
    ),
    ToolDefinition(
        name="shopify_create_theme",
        description="Create a theme, optionally installing it from a zip file URL.",
        arguments=CreateThemeArgs,
        run=lambda client, args: create_theme(client, args.payload()),
        render=mutated("Theme created", "theme"),
    ),
    ToolDefinition(
        name="shopify_update_theme",
        description="Rename a theme or change its role. Setting role 'main' publishes it.",
        arguments=UpdateThemeArgs,
        run=lambda client, args: update_theme(client, args.theme_id, args.payload("theme_id")),
        render=mutated("Theme updated", "theme"),
    ),
    ToolDefinition(
        name="shopify_delete_theme",
        description="Delete a theme. The published theme cannot be deleted.",
        arguments=DeleteThemeArgs,
        run=lambda client, args: delete_theme(client, args.theme_id),
        render=deleted("Theme {theme_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_list_assets",
        description="List the asset keys (file paths) of a theme.",
        arguments=ThemeIdArgs,
        run=lambda client, args: _assets_page(client, args.theme_id),
        render=formatted("assets"),
    ),
    ToolDefinition(
        name="shopify_get_asset",
        description="Get a theme asset's content and metadata.",
        arguments=AssetKeyArgs,
        run=lambda client, args: get_asset(client, args.theme_id, args.key),
        render=formatted("asset"),
    ),
    ToolDefinition(
        name="shopify_create_or_update_asset",
        description=(
            "Create or replace a theme asset. Provide one of value, attachment "
            "or sourceKey."
        ),
        arguments=SaveAssetArgs,
        run=lambda client, args: create_or_update_asset(
            client, args.theme_id, args.payload("theme_id")
        ),
        render=mutated("Asset saved", "asset"),
    ),
    ToolDefinition(
        name="shopify_delete_asset",
        description="Delete a theme asset.",
        arguments=DeleteAssetArgs,
        run=lambda client, args: delete_asset(client, args.theme_id, args.key),
        render=deleted("Asset {key} deleted"),
    ),
]
