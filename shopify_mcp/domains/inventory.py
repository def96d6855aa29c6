"""
Inventory Domain

Locations, inventory levels per location, and inventory items.

Inventory levels are addressed by (inventory item, location) pairs; an
item's ID is found on its product variant as ``inventoryItemId``.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..client import HttpMethod, ShopifyClient
from ..pagination import PaginatedResponse
from ..tools import (
    FormattedArguments,
    PageArguments,
    ToolArguments,
    ToolDefinition,
    counted,
    formatted,
    mutated,
    raw,
)


async def list_locations(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/locations.json", "locations", params)


async def get_location(client: ShopifyClient, location_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/locations/{location_id}.json", "location")


async def count_locations(client: ShopifyClient) -> int:
    return await client.count_resource("/locations/count.json")


async def list_inventory_levels(
    client: ShopifyClient, params: dict[str, Any]
) -> list[dict[str, Any]]:
    """Levels filtered by ``locationIds`` and/or ``inventoryItemIds``."""
    return await client.list_all("/inventory_levels.json", "inventoryLevels", params)


async def _post_level(client: ShopifyClient, action: str, body: dict[str, Any]) -> dict[str, Any]:
    data = await client.request(f"/inventory_levels/{action}.json", HttpMethod.POST, body=body)
    return data.get("inventoryLevel") if isinstance(data, dict) else None


async def adjust_inventory_level(
    client: ShopifyClient, inventory_item_id: int, location_id: int, adjustment: int
) -> dict[str, Any]:
    """Change available stock by a relative amount."""
    return await _post_level(
        client,
        "adjust",
        {
            "inventoryItemId": inventory_item_id,
            "locationId": location_id,
            "availableAdjustment": adjustment,
        },
    )


async def set_inventory_level(
    client: ShopifyClient, inventory_item_id: int, location_id: int, available: int
) -> dict[str, Any]:
    """Set available stock to an absolute amount."""
    return await _post_level(
        client,
        "set",
        {
            "inventoryItemId": inventory_item_id,
            "locationId": location_id,
            "available": available,
        },
    )


async def get_inventory_item(client: ShopifyClient, inventory_item_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/inventory_items/{inventory_item_id}.json", "inventoryItem")


async def update_inventory_item(
    client: ShopifyClient, inventory_item_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(
        f"/inventory_items/{inventory_item_id}.json", "inventoryItem", data
    )


class LocationIdArgs(FormattedArguments):
    location_id: int = Field(description="Location ID")


class ListInventoryLevelsArgs(ToolArguments):
    location_ids: str | None = Field(default=None, description="Comma-separated location IDs")
    inventory_item_ids: str | None = Field(
        default=None, description="Comma-separated inventory item IDs"
    )
    limit: int = Field(default=50, ge=1, le=250)


class AdjustLevelArgs(ToolArguments):
    inventory_item_id: int
    location_id: int
    adjustment: int = Field(description="Amount to add (positive) or remove (negative)")


class SetLevelArgs(ToolArguments):
    inventory_item_id: int
    location_id: int
    available: int = Field(description="New available quantity")


class InventoryItemIdArgs(FormattedArguments):
    inventory_item_id: int


class UpdateInventoryItemArgs(ToolArguments):
    inventory_item_id: int
    sku: str | None = None
    cost: str | None = Field(default=None, description="Unit cost")
    tracked: bool | None = Field(default=None, description="Whether Shopify tracks stock")
    country_code_of_origin: str | None = None
    province_code_of_origin: str | None = None
    harmonized_system_code: str | None = None


INVENTORY_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_locations",
        description="List store locations (warehouses, retail stores, etc.).",
        arguments=PageArguments,
        run=lambda client, args: list_locations(client, args.payload()),
        render=formatted("locations"),
    ),
    ToolDefinition(
        name="shopify_get_location",
        description="Get a single location by ID.",
        arguments=LocationIdArgs,
        run=lambda client, args: get_location(client, args.location_id),
        render=formatted("location"),
    ),
    ToolDefinition(
        name="shopify_get_location_count",
        description="Get the number of locations.",
        arguments=ToolArguments,
        run=lambda client, args: count_locations(client),
        render=counted,
    ),
    ToolDefinition(
        name="shopify_list_inventory_levels",
        description=(
            "List inventory levels. Provide locationIds and/or inventoryItemIds "
            "as comma-separated IDs."
        ),
        arguments=ListInventoryLevelsArgs,
        run=lambda client, args: list_inventory_levels(client, args.payload()),
        render=raw,
    ),
    ToolDefinition(
        name="shopify_adjust_inventory_level",
        description="Adjust the available quantity of an item at a location by a relative amount.",
        arguments=AdjustLevelArgs,
        run=lambda client, args: adjust_inventory_level(
            client, args.inventory_item_id, args.location_id, args.adjustment
        ),
        render=mutated("Inventory adjusted", "level"),
    ),
    ToolDefinition(
        name="shopify_set_inventory_level",
        description="Set the available quantity of an item at a location.",
        arguments=SetLevelArgs,
        run=lambda client, args: set_inventory_level(
            client, args.inventory_item_id, args.location_id, args.available
        ),
        render=mutated("Inventory set", "level"),
    ),
    ToolDefinition(
        name="shopify_get_inventory_item",
        description="Get an inventory item (SKU, cost, tracking, origin).",
        arguments=InventoryItemIdArgs,
        run=lambda client, args: get_inventory_item(client, args.inventory_item_id),
        render=formatted("inventoryItem"),
    ),
    ToolDefinition(
        name="shopify_update_inventory_item",
        description="Update an inventory item's SKU, cost, tracking or origin codes.",
        arguments=UpdateInventoryItemArgs,
        run=lambda client, args: update_inventory_item(
            client, args.inventory_item_id, args.payload("inventory_item_id")
        ),
        render=mutated("Inventory item updated", "item"),
    ),
]
