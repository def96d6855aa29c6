"""
Collections Domain

Custom collections (hand-picked), smart collections (rule-based), and the
collects that link products to custom collections.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ..client import ShopifyClient
from ..pagination import PaginatedResponse
from ..tools import (
    FormattedArguments,
    PageArguments,
    ToolArguments,
    ToolDefinition,
    deleted,
    formatted,
    mutated,
)

SortOrder = Literal[
    "alpha-asc",
    "alpha-desc",
    "best-selling",
    "created",
    "created-desc",
    "manual",
    "price-asc",
    "price-desc",
]


# -----------------------------------------------------------------------------
# Operations
# -----------------------------------------------------------------------------


async def list_custom_collections(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource(
        "/custom_collections.json", "customCollections", params
    )


async def get_custom_collection(client: ShopifyClient, collection_id: int) -> dict[str, Any]:
    return await client.get_resource(
        f"/custom_collections/{collection_id}.json", "customCollection"
    )


async def create_custom_collection(
    client: ShopifyClient, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource("/custom_collections.json", "customCollection", data)


async def update_custom_collection(
    client: ShopifyClient, collection_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(
        f"/custom_collections/{collection_id}.json", "customCollection", data
    )


async def delete_custom_collection(client: ShopifyClient, collection_id: int) -> None:
    await client.delete_resource(f"/custom_collections/{collection_id}.json")


async def list_smart_collections(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/smart_collections.json", "smartCollections", params)


async def get_smart_collection(client: ShopifyClient, collection_id: int) -> dict[str, Any]:
    return await client.get_resource(
        f"/smart_collections/{collection_id}.json", "smartCollection"
    )


async def create_smart_collection(
    client: ShopifyClient, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource("/smart_collections.json", "smartCollection", data)


async def update_smart_collection(
    client: ShopifyClient, collection_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(
        f"/smart_collections/{collection_id}.json", "smartCollection", data
    )


async def delete_smart_collection(client: ShopifyClient, collection_id: int) -> None:
    await client.delete_resource(f"/smart_collections/{collection_id}.json")


async def get_collection(client: ShopifyClient, collection_id: int) -> dict[str, Any]:
    """Either kind of collection, by ID."""
    return await client.get_resource(f"/collections/{collection_id}.json", "collection")


async def list_collection_products(
    client: ShopifyClient, collection_id: int, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource(
        f"/collections/{collection_id}/products.json", "products", params
    )


async def list_collects(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/collects.json", "collects", params)


async def create_collect(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/collects.json", "collect", data)


async def delete_collect(client: ShopifyClient, collect_id: int) -> None:
    await client.delete_resource(f"/collects/{collect_id}.json")


# -----------------------------------------------------------------------------
# Arguments
# -----------------------------------------------------------------------------


class ListCollectionsArgs(PageArguments):
    since_id: str | None = None
    title: str | None = Field(default=None, description="Filter by title")
    product_id: str | None = Field(
        default=None, description="Only collections containing this product"
    )
    handle: str | None = None
    published_status: Literal["published", "unpublished", "any"] | None = None


class CollectionIdArgs(FormattedArguments):
    collection_id: int = Field(description="Collection ID")


class CollectionPageArgs(PageArguments):
    collection_id: int = Field(description="Collection ID")


class CollectionImage(ToolArguments):
    src: str | None = None
    alt: str | None = None


class SmartCollectionRule(ToolArguments):
    column: str = Field(description="Field to match")
    relation: str = Field(description="Comparison operator")
    condition: str = Field(description="Value to match")


class CreateCustomCollectionArgs(ToolArguments):
    title: str = Field(description="Collection title (required)")
    body_html: str | None = None
    handle: str | None = None
    published: bool | None = None
    sort_order: SortOrder | None = None
    image: CollectionImage | None = None


class UpdateCustomCollectionArgs(ToolArguments):
    collection_id: int
    title: str | None = None
    body_html: str | None = None
    handle: str | None = None
    published: bool | None = None
    sort_order: SortOrder | None = None


class DeleteCollectionArgs(ToolArguments):
    collection_id: int


class CreateSmartCollectionArgs(ToolArguments):
    title: str = Field(description="Collection title (required)")
    rules: list[SmartCollectionRule] = Field(description="Collection rules")
    disjunctive: bool | None = Field(
        default=None, description="Match any rule (true) or all rules (false)"
    )
    body_html: str | None = None
    handle: str | None = None
    published: bool | None = None
    sort_order: SortOrder | None = None


class UpdateSmartCollectionArgs(ToolArguments):
    collection_id: int
    title: str | None = None
    rules: list[SmartCollectionRule] | None = None
    disjunctive: bool | None = None
    body_html: str | None = None
    handle: str | None = None
    published: bool | None = None
    sort_order: SortOrder | None = None


class ListCollectsArgs(PageArguments):
    product_id: str | None = None
    collection_id: str | None = None


class CreateCollectArgs(ToolArguments):
    product_id: int = Field(description="Product ID")
    collection_id: int = Field(description="Custom collection ID")
    position: int | None = Field(default=None, description="Position in the collection")


class DeleteCollectArgs(ToolArguments):
    collect_id: int


# -----------------------------------------------------------------------------
# Tools
# -----------------------------------------------------------------------------


COLLECTION_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_custom_collections",
        description="List custom (manually curated) collections.",
        arguments=ListCollectionsArgs,
        run=lambda client, args: list_custom_collections(client, args.payload()),
        render=formatted("customCollections"),
    ),
    ToolDefinition(
        name="shopify_get_custom_collection",
        description="Get a custom collection by ID.",
        arguments=CollectionIdArgs,
        run=lambda client, args: get_custom_collection(client, args.collection_id),
        render=formatted("customCollection"),
    ),
    ToolDefinition(
        name="shopify_create_custom_collection",
        description="Create a custom collection.",
        arguments=CreateCustomCollectionArgs,
        run=lambda client, args: create_custom_collection(client, args.payload()),
        render=mutated("Collection created", "collection"),
    ),
    ToolDefinition(
        name="shopify_update_custom_collection",
        description="Update a custom collection.",
        arguments=UpdateCustomCollectionArgs,
        run=lambda client, args: update_custom_collection(
            client, args.collection_id, args.payload("collection_id")
        ),
        render=mutated("Collection updated", "collection"),
    ),
    ToolDefinition(
        name="shopify_delete_custom_collection",
        description="Delete a custom collection.",
        arguments=DeleteCollectionArgs,
        run=lambda client, args: delete_custom_collection(client, args.collection_id),
        render=deleted("Collection {collection_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_list_smart_collections",
        description="List smart (rule-based) collections.",
        arguments=ListCollectionsArgs,
        run=lambda client, args: list_smart_collections(client, args.payload()),
        render=formatted("smartCollections"),
    ),
    ToolDefinition(
        name="shopify_get_smart_collection",
        description="Get a smart collection by ID.",
        arguments=CollectionIdArgs,
        run=lambda client, args: get_smart_collection(client, args.collection_id),
        render=formatted("smartCollection"),
    ),
    ToolDefinition(
        name="shopify_create_smart_collection",
        description=(
            "Create a smart collection. Products are included automatically when "
            "they match the rules (e.g. column=tag, relation=equals, condition=sale)."
        ),
        arguments=CreateSmartCollectionArgs,
        run=lambda client, args: create_smart_collection(client, args.payload()),
        render=mutated("Smart collection created", "collection"),
    ),
    ToolDefinition(
        name="shopify_update_smart_collection",
        description="Update a smart collection, including its rules.",
        arguments=UpdateSmartCollectionArgs,
        run=lambda client, args: update_smart_collection(
            client, args.collection_id, args.payload("collection_id")
        ),
        render=mutated("Smart collection updated", "collection"),
    ),
    ToolDefinition(
        name="shopify_delete_smart_collection",
        description="Delete a smart collection.",
        arguments=DeleteCollectionArgs,
        run=lambda client, args: delete_smart_collection(client, args.collection_id),
        render=deleted("Smart collection {collection_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_get_collection",
        description="Get any collection (custom or smart) by ID.",
        arguments=CollectionIdArgs,
        run=lambda client, args: get_collection(client, args.collection_id),
        render=formatted("collection"),
    ),
    ToolDefinition(
        name="shopify_list_collection_products",
        description="List the products in a collection.",
        arguments=CollectionPageArgs,
        run=lambda client, args: list_collection_products(
            client, args.collection_id, args.payload("collection_id")
        ),
        render=formatted("products"),
    ),
    ToolDefinition(
        name="shopify_list_collects",
        description="List collects (product to custom collection links).",
        arguments=ListCollectsArgs,
        run=lambda client, args: list_collects(client, args.payload()),
        render=formatted("collects"),
    ),
    ToolDefinition(
        name="shopify_create_collect",
        description="Add a product to a custom collection.",
        arguments=CreateCollectArgs,
        run=lambda client, args: create_collect(client, args.payload()),
        render=mutated("Product added to collection", "collect"),
    ),
    ToolDefinition(
        name="shopify_delete_collect",
        description="Remove a product from a custom collection by deleting the collect.",
        arguments=DeleteCollectArgs,
        run=lambda client, args: delete_collect(client, args.collect_id),
        render=deleted("Collect {collect_id} deleted (product removed from collection)"),
    ),
]
