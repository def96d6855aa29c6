"""
Orders Domain

Orders CRUD, counts, and the close/open/cancel state transitions.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ..client import HttpMethod, ShopifyClient
from ..pagination import PaginatedResponse
from ..tools import (
    FormattedArguments,
    PageArguments,
    ToolArguments,
    ToolDefinition,
    counted,
    deleted,
    formatted,
    mutated,
)
from .common import AddressInput, CustomerRefInput, LineItemInput

OrderStatus = Literal["open", "closed", "cancelled", "any"]
FinancialStatus = Literal[
    "authorized",
    "pending",
    "paid",
    "partially_paid",
    "refunded",
    "voided",
    "partially_refunded",
    "any",
    "unpaid",
]
FulfillmentStatus = Literal["shipped", "partial", "unshipped", "any", "unfulfilled"]


# -----------------------------------------------------------------------------
# Operations
# -----------------------------------------------------------------------------


async def list_orders(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/orders.json", "orders", params)


async def get_order(client: ShopifyClient, order_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/orders/{order_id}.json", "order")


async def create_order(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/orders.json", "order", data)


async def update_order(
    client: ShopifyClient, order_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(f"/orders/{order_id}.json", "order", data)


async def delete_order(client: ShopifyClient, order_id: int) -> None:
    await client.delete_resource(f"/orders/{order_id}.json")


async def count_orders(client: ShopifyClient, params: dict[str, Any] | None = None) -> int:
    return await client.count_resource("/orders/count.json", params)


async def _order_action(
    client: ShopifyClient, order_id: int, action: str, body: dict[str, Any] | None = None
) -> dict[str, Any]:
    data = await client.request(
        f"/orders/{order_id}/{action}.json", HttpMethod.POST, body=body
    )
    return data.get("order") if isinstance(data, dict) else None


async def close_order(client: ShopifyClient, order_id: int) -> dict[str, Any]:
    return await _order_action(client, order_id, "close")


async def open_order(client: ShopifyClient, order_id: int) -> dict[str, Any]:
    """Re-open a closed order."""
    return await _order_action(client, order_id, "open")


async def cancel_order(
    client: ShopifyClient, order_id: int, options: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Cancel an order. ``options`` may carry ``reason``, ``email`` and ``restock``."""
    return await _order_action(client, order_id, "cancel", options or None)


# -----------------------------------------------------------------------------
# Arguments
# -----------------------------------------------------------------------------


class OrderFilters(ToolArguments):
    status: OrderStatus | None = None
    financial_status: FinancialStatus | None = None
    fulfillment_status: FulfillmentStatus | None = None
    created_at_min: str | None = Field(default=None, description="ISO 8601 date")
    created_at_max: str | None = Field(default=None, description="ISO 8601 date")


class ListOrdersArgs(PageArguments):
    since_id: str | None = None
    status: OrderStatus | None = None
    financial_status: FinancialStatus | None = None
    fulfillment_status: FulfillmentStatus | None = None
    created_at_min: str | None = None
    created_at_max: str | None = None
    updated_at_min: str | None = None
    updated_at_max: str | None = None
    processed_at_min: str | None = None
    processed_at_max: str | None = None
    ids: str | None = Field(default=None, description="Comma-separated order IDs")


class OrderIdArgs(FormattedArguments):
    order_id: int = Field(description="Order ID")


class OrderActionArgs(ToolArguments):
    order_id: int = Field(description="Order ID")


class CreateOrderArgs(ToolArguments):
    line_items: list[LineItemInput] = Field(description="Line items (required)")
    customer: CustomerRefInput | None = None
    billing_address: AddressInput | None = None
    shipping_address: AddressInput | None = None
    email: str | None = None
    financial_status: str | None = None
    fulfillment_status: str | None = None
    note: str | None = None
    tags: str | None = None
    send_receipt: bool | None = Field(default=None, description="Send order receipt email")
    send_fulfillment_receipt: bool | None = None


class UpdateOrderArgs(ToolArguments):
    order_id: int
    email: str | None = None
    phone: str | None = None
    note: str | None = None
    tags: str | None = None
    shipping_address: AddressInput | None = None
    buyer_accepts_marketing: bool | None = None


class CancelOrderArgs(ToolArguments):
    order_id: int
    reason: Literal["customer", "fraud", "inventory", "declined", "other"] | None = None
    email: bool | None = Field(default=None, description="Notify the customer")
    restock: bool | None = Field(default=None, description="Restock the line items")


# -----------------------------------------------------------------------------
# Tools
# -----------------------------------------------------------------------------


ORDER_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_orders",
        description=(
            "List orders with filters for status, financial status, fulfillment "
            "status, and created/updated/processed date ranges."
        ),
        arguments=ListOrdersArgs,
        run=lambda client, args: list_orders(client, args.payload()),
        render=formatted("orders"),
    ),
    ToolDefinition(
        name="shopify_get_order",
        description="Get a single order by ID, including line items and addresses.",
        arguments=OrderIdArgs,
        run=lambda client, args: get_order(client, args.order_id),
        render=formatted("order"),
    ),
    ToolDefinition(
        name="shopify_create_order",
        description="Create a new order (typically for importing historical orders).",
        arguments=CreateOrderArgs,
        run=lambda client, args: create_order(client, args.payload()),
        render=mutated("Order created", "order"),
    ),
    ToolDefinition(
        name="shopify_update_order",
        description="Update an order's email, phone, note, tags or shipping address.",
        arguments=UpdateOrderArgs,
        run=lambda client, args: update_order(
            client, args.order_id, args.payload("order_id")
        ),
        render=mutated("Order updated", "order"),
    ),
    ToolDefinition(
        name="shopify_delete_order",
        description="Delete an order. Only closed or cancelled orders can be deleted.",
        arguments=OrderActionArgs,
        run=lambda client, args: delete_order(client, args.order_id),
        render=deleted("Order {order_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_get_order_count",
        description="Get the count of orders matching filters.",
        arguments=OrderFilters,
        run=lambda client, args: count_orders(client, args.payload()),
        render=counted,
    ),
    ToolDefinition(
        name="shopify_close_order",
        description="Close an order.",
        arguments=OrderActionArgs,
        run=lambda client, args: close_order(client, args.order_id),
        render=mutated("Order closed", "order"),
    ),
    ToolDefinition(
        name="shopify_open_order",
        description="Re-open a closed order.",
        arguments=OrderActionArgs,
        run=lambda client, args: open_order(client, args.order_id),
        render=mutated("Order opened", "order"),
    ),
    ToolDefinition(
        name="shopify_cancel_order",
        description="Cancel an order, optionally notifying the customer and restocking items.",
        arguments=CancelOrderArgs,
        run=lambda client, args: cancel_order(client, args.order_id, args.payload("order_id")),
        render=mutated("Order cancelled", "order"),
    ),
]
