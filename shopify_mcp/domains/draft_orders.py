"""
Draft Orders Domain

Draft orders are orders built by staff (phone orders, custom quotes). They
can be invoiced to the customer and completed into real orders.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ..client import HttpMethod, ShopifyClient
from ..models import ToolCallResult
from ..pagination import PaginatedResponse
from ..tools import (
    FormattedArguments,
    PageArguments,
    ToolArguments,
    ToolDefinition,
    deleted,
    formatted,
    json_result,
    mutated,
)
from .common import AddressInput, CustomerRefInput, LineItemInput


async def list_draft_orders(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/draft_orders.json", "draftOrders", params)


async def get_draft_order(client: ShopifyClient, draft_order_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/draft_orders/{draft_order_id}.json", "draftOrder")


async def create_draft_order(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/draft_orders.json", "draftOrder", data)


async def update_draft_order(
    client: ShopifyClient, draft_order_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(
        f"/draft_orders/{draft_order_id}.json", "draftOrder", data
    )


async def delete_draft_order(client: ShopifyClient, draft_order_id: int) -> None:
    await client.delete_resource(f"/draft_orders/{draft_order_id}.json")


async def complete_draft_order(
    client: ShopifyClient, draft_order_id: int, payment_pending: bool = False
) -> dict[str, Any]:
    """Turn a draft into an order, marked paid unless ``payment_pending``."""
    data = await client.request(
        f"/draft_orders/{draft_order_id}/complete.json",
        HttpMethod.PUT,
        params={"paymentPending": payment_pending},
    )
    return data.get("draftOrder") if isinstance(data, dict) else None


async def send_draft_order_invoice(
    client: ShopifyClient, draft_order_id: int, invoice: dict[str, Any] | None = None
) -> dict[str, Any]:
    return await client.request(
        f"/draft_orders/{draft_order_id}/send_invoice.json",
        HttpMethod.POST,
        body={"draftOrderInvoice": invoice or {}},
    )


class ListDraftOrdersArgs(PageArguments):
    since_id: str | None = None
    status: Literal["open", "invoice_sent", "completed"] | None = None
    updated_at_min: str | None = None
    updated_at_max: str | None = None


class DraftOrderIdArgs(FormattedArguments):
    draft_order_id: int = Field(description="Draft order ID")


class AppliedDiscount(ToolArguments):
    title: str | None = None
    value: str
    value_type: Literal["fixed_amount", "percentage"]


class CreateDraftOrderArgs(ToolArguments):
    line_items: list[LineItemInput] = Field(description="Line items (required)")
    customer: CustomerRefInput | None = None
    email: str | None = None
    shipping_address: AddressInput | None = None
    billing_address: AddressInput | None = None
    note: str | None = None
    tags: str | None = None
    use_customer_default_address: bool | None = None
    tax_exempt: bool | None = None
    applied_discount: AppliedDiscount | None = None


class UpdateDraftOrderArgs(ToolArguments):
    draft_order_id: int
    line_items: list[LineItemInput] | None = None
    customer: CustomerRefInput | None = None
    email: str | None = None
    shipping_address: AddressInput | None = None
    billing_address: AddressInput | None = None
    note: str | None = None
    tags: str | None = None
    applied_discount: AppliedDiscount | None = None


class DeleteDraftOrderArgs(ToolArguments):
    draft_order_id: int


class CompleteDraftOrderArgs(ToolArguments):
    draft_order_id: int
    payment_pending: bool = Field(
        default=False, description="Leave payment pending instead of marking paid"
    )


class SendInvoiceArgs(ToolArguments):
    draft_order_id: int
    to: str | None = Field(default=None, description="Recipient email")
    from_: str | None = Field(default=None, alias="from", description="Sender email")
    subject: str | None = None
    custom_message: str | None = None


def _invoice_sent(result: Any, args: Any) -> ToolCallResult:
    return json_result({"success": True, "message": "Invoice sent", **(result or {})})


DRAFT_ORDER_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_draft_orders",
        description="List draft orders, optionally filtered by status and update date.",
        arguments=ListDraftOrdersArgs,
        run=lambda client, args: list_draft_orders(client, args.payload()),
        render=formatted("draftOrders"),
    ),
    ToolDefinition(
        name="shopify_get_draft_order",
        description="Get a draft order by ID.",
        arguments=DraftOrderIdArgs,
        run=lambda client, args: get_draft_order(client, args.draft_order_id),
        render=formatted("draftOrder"),
    ),
    ToolDefinition(
        name="shopify_create_draft_order",
        description="Create a draft order with line items, customer, addresses and discount.",
        arguments=CreateDraftOrderArgs,
        run=lambda client, args: create_draft_order(client, args.payload()),
        render=mutated("Draft order created", "draftOrder"),
    ),
    ToolDefinition(
        name="shopify_update_draft_order",
        description="Update a draft order.",
        arguments=UpdateDraftOrderArgs,
        run=lambda client, args: update_draft_order(
            client, args.draft_order_id, args.payload("draft_order_id")
        ),
        render=mutated("Draft order updated", "draftOrder"),
    ),
    ToolDefinition(
        name="shopify_delete_draft_order",
        description="Delete a draft order.",
        arguments=DeleteDraftOrderArgs,
        run=lambda client, args: delete_draft_order(client, args.draft_order_id),
        render=deleted("Draft order {draft_order_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_complete_draft_order",
        description="Complete a draft order, converting it into an order.",
        arguments=CompleteDraftOrderArgs,
        run=lambda client, args: complete_draft_order(
            client, args.draft_order_id, args.payment_pending
        ),
        render=mutated("Draft order completed", "draftOrder"),
    ),
    ToolDefinition(
        name="shopify_send_draft_order_invoice",
        description="Email an invoice for a draft order to the customer.",
        arguments=SendInvoiceArgs,
        run=lambda client, args: send_draft_order_invoice(
            client, args.draft_order_id, args.payload("draft_order_id")
        ),
        render=_invoice_sent,
    ),
]
