"""
Fulfillments Domain

Fulfillments record shipped line items. New fulfillments are created against
fulfillment orders, which Shopify generates per order and location.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..client import HttpMethod, ShopifyClient
from ..pagination import PaginatedResponse, wrap_items
from ..tools import (
    FormattedArguments,
    PageArguments,
    ToolArguments,
    ToolDefinition,
    formatted,
    mutated,
)


async def list_fulfillments(
    client: ShopifyClient, order_id: int, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource(f"/orders/{order_id}/fulfillments.json", "fulfillments", params)


async def get_fulfillment(
    client: ShopifyClient, order_id: int, fulfillment_id: int
) -> dict[str, Any]:
    return await client.get_resource(
        f"/orders/{order_id}/fulfillments/{fulfillment_id}.json", "fulfillment"
    )


async def create_fulfillment(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/fulfillments.json", "fulfillment", data)


async def update_fulfillment_tracking(
    client: ShopifyClient, fulfillment_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource(
        f"/fulfillments/{fulfillment_id}/update_tracking.json", "fulfillment", data
    )


async def cancel_fulfillment(client: ShopifyClient, fulfillment_id: int) -> dict[str, Any]:
    data = await client.request(f"/fulfillments/{fulfillment_id}/cancel.json", HttpMethod.POST)
    return data.get("fulfillment") if isinstance(data, dict) else None


async def list_fulfillment_orders(client: ShopifyClient, order_id: int) -> list[dict[str, Any]]:
    return await client.list_all(
        f"/orders/{order_id}/fulfillment_orders.json", "fulfillmentOrders"
    )


async def get_fulfillment_order(
    client: ShopifyClient, fulfillment_order_id: int
) -> dict[str, Any]:
    return await client.get_resource(
        f"/fulfillment_orders/{fulfillment_order_id}.json", "fulfillmentOrder"
    )


class OrderFulfillmentsArgs(PageArguments):
    order_id: int = Field(description="Order ID")


class FulfillmentIdArgs(FormattedArguments):
    order_id: int
    fulfillment_id: int


class TrackingInfo(ToolArguments):
    number: str | None = Field(default=None, description="Tracking number")
    url: str | None = Field(default=None, description="Tracking URL")
    company: str | None = Field(default=None, description="Carrier name")


class FulfillmentOrderLineItem(ToolArguments):
    id: int
    quantity: int


class FulfillmentOrderLineItems(ToolArguments):
    fulfillment_order_id: int
    fulfillment_order_line_items: list[FulfillmentOrderLineItem] | None = Field(
        default=None, description="Omit to fulfill every remaining line item"
    )


class CreateFulfillmentArgs(ToolArguments):
    line_items_by_fulfillment_order: list[FulfillmentOrderLineItems]
    tracking_info: TrackingInfo | None = None
    notify_customer: bool = True


class UpdateTrackingArgs(ToolArguments):
    fulfillment_id: int
    tracking_info: TrackingInfo
    notify_customer: bool = False


class CancelFulfillmentArgs(ToolArguments):
    fulfillment_id: int


class FulfillmentOrdersArgs(FormattedArguments):
    order_id: int


class FulfillmentOrderIdArgs(FormattedArguments):
    fulfillment_order_id: int


async def _list_fulfillment_orders_page(client: ShopifyClient, order_id: int) -> PaginatedResponse:
    return wrap_items(await list_fulfillment_orders(client, order_id))


FULFILLMENT_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_fulfillments",
        description="List fulfillments for an order.",
        arguments=OrderFulfillmentsArgs,
        run=lambda client, args: list_fulfillments(
            client, args.order_id, args.payload("order_id")
        ),
        render=formatted("fulfillments"),
    ),
    ToolDefinition(
        name="shopify_get_fulfillment",
        description="Get a fulfillment of an order.",
        arguments=FulfillmentIdArgs,
        run=lambda client, args: get_fulfillment(client, args.order_id, args.fulfillment_id),
        render=formatted("fulfillment"),
    ),
    ToolDefinition(
        name="shopify_create_fulfillment",
        description=(
            "Create a fulfillment for one or more fulfillment orders. Use "
            "shopify_list_fulfillment_orders to find fulfillment order IDs."
        ),
        arguments=CreateFulfillmentArgs,
        run=lambda client, args: create_fulfillment(client, args.payload()),
        render=mutated("Fulfillment created", "fulfillment"),
    ),
    ToolDefinition(
        name="shopify_update_fulfillment_tracking",
        description="Update the tracking number, URL or carrier of a fulfillment.",
        arguments=UpdateTrackingArgs,
        run=lambda client, args: update_fulfillment_tracking(
            client, args.fulfillment_id, args.payload("fulfillment_id")
        ),
        render=mutated("Tracking updated", "fulfillment"),
    ),
    ToolDefinition(
        name="shopify_cancel_fulfillment",
        description="Cancel a fulfillment.",
        arguments=CancelFulfillmentArgs,
        run=lambda client, args: cancel_fulfillment(client, args.fulfillment_id),
        render=mutated("Fulfillment cancelled", "fulfillment"),
    ),
    ToolDefinition(
        name="shopify_list_fulfillment_orders",
        description="List the fulfillment orders of an order, with their line items.",
        arguments=FulfillmentOrdersArgs,
        run=lambda client, args: _list_fulfillment_orders_page(client, args.order_id),
        render=formatted("fulfillmentOrders"),
    ),
    ToolDefinition(
        name="shopify_get_fulfillment_order",
        description="Get a fulfillment order by ID.",
        arguments=FulfillmentOrderIdArgs,
        run=lambda client, args: get_fulfillment_order(client, args.fulfillment_order_id),
        render=formatted("fulfillmentOrder"),
    ),
]
