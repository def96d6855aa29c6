"""
Transactions Domain

Payment transactions on an order, and refunds (including refund
calculation, which previews a refund without creating it).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ..client import HttpMethod, ShopifyClient
from ..models import ToolCallResult
from ..pagination import PaginatedResponse, wrap_items
from ..tools import (
    FormattedArguments,
    ToolArguments,
    ToolDefinition,
    formatted,
    json_result,
    mutated,
)


async def list_transactions(client: ShopifyClient, order_id: int) -> list[dict[str, Any]]:
    return await client.list_all(f"/orders/{order_id}/transactions.json", "transactions")


async def get_transaction(
    client: ShopifyClient, order_id: int, transaction_id: int
) -> dict[str, Any]:
    return await client.get_resource(
        f"/orders/{order_id}/transactions/{transaction_id}.json", "transaction"
    )


async def create_transaction(
    client: ShopifyClient, order_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource(
        f"/orders/{order_id}/transactions.json", "transaction", data
    )


async def list_refunds(client: ShopifyClient, order_id: int) -> list[dict[str, Any]]:
    return await client.list_all(f"/orders/{order_id}/refunds.json", "refunds")


async def get_refund(client: ShopifyClient, order_id: int, refund_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/orders/{order_id}/refunds/{refund_id}.json", "refund")


async def create_refund(
    client: ShopifyClient, order_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource(f"/orders/{order_id}/refunds.json", "refund", data)


async def calculate_refund(
    client: ShopifyClient, order_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    """Preview refund amounts and transactions; nothing is refunded."""
    return await client.create_resource(
        f"/orders/{order_id}/refunds/calculate.json", "refund", data, method=HttpMethod.POST
    )


class OrderIdArgs(FormattedArguments):
    order_id: int = Field(description="Order ID")


class TransactionIdArgs(FormattedArguments):
    order_id: int
    transaction_id: int


class CreateTransactionArgs(ToolArguments):
    order_id: int
    kind: Literal["authorization", "capture", "sale", "void", "refund"] = Field(
        description="Transaction kind"
    )
    amount: str | None = Field(default=None, description="Amount (omit for full capture)")
    currency: str | None = None
    parent_id: int | None = Field(
        default=None, description="Parent transaction ID (for capture, void, refund)"
    )
    gateway: str | None = None


class RefundIdArgs(FormattedArguments):
    order_id: int
    refund_id: int


class RefundLineItem(ToolArguments):
    line_item_id: int
    quantity: int
    restock_type: Literal["no_restock", "cancel", "return"] | None = None


class RefundShipping(ToolArguments):
    full_refund: bool | None = None
    amount: str | None = None


class RefundTransaction(ToolArguments):
    parent_id: int | None = None
    amount: str
    kind: str | None = None
    gateway: str | None = None


class CalculateRefundArgs(ToolArguments):
    order_id: int
    refund_line_items: list[RefundLineItem] | None = None
    shipping: RefundShipping | None = None


class CreateRefundArgs(ToolArguments):
    order_id: int
    refund_line_items: list[RefundLineItem] | None = None
    shipping: RefundShipping | None = None
    notify: bool = Field(default=True, description="Notify the customer")
    note: str | None = None
    transactions: list[RefundTransaction] | None = Field(
        default=None, description="Use the transactions from shopify_calculate_refund"
    )


async def _transactions_page(client: ShopifyClient, order_id: int) -> PaginatedResponse:
    return wrap_items(await list_transactions(client, order_id))


async def _refunds_page(client: ShopifyClient, order_id: int) -> PaginatedResponse:
    return wrap_items(await list_refunds(client, order_id))


def _calculated(result: Any, args: Any) -> ToolCallResult:
    return json_result({"calculated": True, "refund": result})


TRANSACTION_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_transactions",
        description="List the payment transactions of an order.",
        arguments=OrderIdArgs,
        run=lambda client, args: _transactions_page(client, args.order_id),
        render=formatted("transactions"),
    ),
    ToolDefinition(
        name="shopify_get_transaction",
        description="Get a transaction of an order.",
        arguments=TransactionIdArgs,
        run=lambda client, args: get_transaction(client, args.order_id, args.transaction_id),
        render=formatted("transaction"),
    ),
    ToolDefinition(
        name="shopify_create_transaction",
        description="Create a transaction (capture, void, refund, ...) on an order.",
        arguments=CreateTransactionArgs,
        run=lambda client, args: create_transaction(
            client, args.order_id, args.payload("order_id")
        ),
        render=mutated("Transaction created", "transaction"),
    ),
    ToolDefinition(
        name="shopify_list_refunds",
        description="List the refunds of an order.",
        arguments=OrderIdArgs,
        run=lambda client, args: _refunds_page(client, args.order_id),
        render=formatted("refunds"),
    ),
    ToolDefinition(
        name="shopify_get_refund",
        description="Get a refund of an order.",
        arguments=RefundIdArgs,
        run=lambda client, args: get_refund(client, args.order_id, args.refund_id),
        render=formatted("refund"),
    ),
    ToolDefinition(
        name="shopify_calculate_refund",
        description=(
            "Calculate a refund for line items and shipping without creating it. "
            "Use the result's transactions with shopify_create_refund."
        ),
        arguments=CalculateRefundArgs,
        run=lambda client, args: calculate_refund(
            client, args.order_id, args.payload("order_id")
        ),
        render=_calculated,
    ),
    ToolDefinition(
        name="shopify_create_refund",
        description="Create a refund for line items, shipping, or an amount.",
        arguments=CreateRefundArgs,
        run=lambda client, args: create_refund(client, args.order_id, args.payload("order_id")),
        render=mutated("Refund created", "refund"),
    ),
]
