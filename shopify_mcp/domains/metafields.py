"""
Metafields Domain

Custom key/value data attached to any resource. A metafield's owner is
given as a resource path segment (``products``, ``customers``, ``orders``,
``collections``, ...) plus the owner's ID; shop-level metafields have no
owner.
"""

from __future__ import annotations

from typing import Any

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


def _owner_path(owner_resource: str, owner_id: int) -> str:
    return f"/{owner_resource}/{owner_id}/metafields"


async def list_metafields(
    client: ShopifyClient,
    owner_resource: str,
    owner_id: int,
    params: dict[str, Any] | None = None,
) -> PaginatedResponse:
    return await client.list_resource(
        f"{_owner_path(owner_resource, owner_id)}.json", "metafields", params
    )


async def get_metafield(
    client: ShopifyClient, owner_resource: str, owner_id: int, metafield_id: int
) -> dict[str, Any]:
    return await client.get_resource(
        f"{_owner_path(owner_resource, owner_id)}/{metafield_id}.json", "metafield"
    )


async def create_metafield(
    client: ShopifyClient, owner_resource: str, owner_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource(
        f"{_owner_path(owner_resource, owner_id)}.json", "metafield", data
    )


async def update_metafield(
    client: ShopifyClient,
    owner_resource: str,
    owner_id: int,
    metafield_id: int,
    data: dict[str, Any],
) -> dict[str, Any]:
    return await client.update_resource(
        f"{_owner_path(owner_resource, owner_id)}/{metafield_id}.json", "metafield", data
    )


async def delete_metafield(
    client: ShopifyClient, owner_resource: str, owner_id: int, metafield_id: int
) -> None:
    await client.delete_resource(f"{_owner_path(owner_resource, owner_id)}/{metafield_id}.json")


async def list_shop_metafields(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/metafields.json", "metafields", params)


async def create_shop_metafield(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/metafields.json", "metafield", data)


class OwnerArgs(ToolArguments):
    owner_resource: str = Field(description='Resource type, e.g. "products"')
    owner_id: int = Field(description="Resource ID")


class ListShopMetafieldsArgs(PageArguments):
    namespace: str | None = None
    key: str | None = None


class ListMetafieldsArgs(ListShopMetafieldsArgs, OwnerArgs):
    pass


class MetafieldIdArgs(FormattedArguments, OwnerArgs):
    metafield_id: int


class MetafieldInput(ToolArguments):
    namespace: str = Field(description="Metafield namespace")
    key: str = Field(description="Metafield key")
    value: str = Field(description="Metafield value")
    type: str = Field(description="Metafield type, e.g. single_line_text_field")
    description: str | None = None


class CreateMetafieldArgs(MetafieldInput, OwnerArgs):
    pass


class UpdateMetafieldArgs(OwnerArgs):
    metafield_id: int
    value: str = Field(description="New value")
    type: str | None = None


class DeleteMetafieldArgs(OwnerArgs):
    metafield_id: int


_OWNER_FIELDS = ("owner_resource", "owner_id")


METAFIELD_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_metafields",
        description="List the metafields of a resource, optionally filtered by namespace and key.",
        arguments=ListMetafieldsArgs,
        run=lambda client, args: list_metafields(
            client, args.owner_resource, args.owner_id, args.payload(*_OWNER_FIELDS)
        ),
        render=formatted("metafields"),
    ),
    ToolDefinition(
        name="shopify_get_metafield",
        description="Get a metafield of a resource.",
        arguments=MetafieldIdArgs,
        run=lambda client, args: get_metafield(
            client, args.owner_resource, args.owner_id, args.metafield_id
        ),
        render=formatted("metafield"),
    ),
    ToolDefinition(
        name="shopify_create_metafield",
        description="Create a metafield on a resource (product, customer, order, ...).",
        arguments=CreateMetafieldArgs,
        run=lambda client, args: create_metafield(
            client, args.owner_resource, args.owner_id, args.payload(*_OWNER_FIELDS)
        ),
        render=mutated("Metafield created", "metafield"),
    ),
    ToolDefinition(
        name="shopify_update_metafield",
        description="Update a metafield's value.",
        arguments=UpdateMetafieldArgs,
        run=lambda client, args: update_metafield(
            client,
            args.owner_resource,
            args.owner_id,
            args.metafield_id,
            args.payload(*_OWNER_FIELDS, "metafield_id"),
        ),
        render=mutated("Metafield updated", "metafield"),
    ),
    ToolDefinition(
        name="shopify_delete_metafield",
        description="Delete a metafield.",
        arguments=DeleteMetafieldArgs,
        run=lambda client, args: delete_metafield(
            client, args.owner_resource, args.owner_id, args.metafield_id
        ),
        render=deleted("Metafield {metafield_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_list_shop_metafields",
        description="List shop-level metafields.",
        arguments=ListShopMetafieldsArgs,
        run=lambda client, args: list_shop_metafields(client, args.payload()),
        render=formatted("metafields"),
    ),
    ToolDefinition(
        name="shopify_create_shop_metafield",
        description="Create a shop-level metafield.",
        arguments=MetafieldInput,
        run=lambda client, args: create_shop_metafield(client, args.payload()),
        render=mutated("Shop metafield created", "metafield"),
    ),
]
