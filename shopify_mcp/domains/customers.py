"""
Customers Domain

Customer records, search, and per-customer order history.
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
    counted,
    deleted,
    formatted,
    mutated,
)


async def list_customers(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/customers.json", "customers", params)


async def get_customer(client: ShopifyClient, customer_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/customers/{customer_id}.json", "customer")


async def create_customer(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/customers.json", "customer", data)


async def update_customer(
    client: ShopifyClient, customer_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(f"/customers/{customer_id}.json", "customer", data)


async def delete_customer(client: ShopifyClient, customer_id: int) -> None:
    await client.delete_resource(f"/customers/{customer_id}.json")


async def count_customers(client: ShopifyClient, params: dict[str, Any] | None = None) -> int:
    return await client.count_resource("/customers/count.json", params)


async def search_customers(client: ShopifyClient, params: dict[str, Any]) -> PaginatedResponse:
    """Search with Shopify's query syntax, e.g. ``email:bob@example.com``."""
    return await client.list_resource("/customers/search.json", "customers", params)


async def list_customer_orders(
    client: ShopifyClient, customer_id: int, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource(f"/customers/{customer_id}/orders.json", "orders", params)


class DateRangeFilters(ToolArguments):
    created_at_min: str | None = None
    created_at_max: str | None = None
    updated_at_min: str | None = None
    updated_at_max: str | None = None


class ListCustomersArgs(PageArguments):
    since_id: str | None = None
    ids: str | None = Field(default=None, description="Comma-separated customer IDs")
    created_at_min: str | None = None
    created_at_max: str | None = None
    updated_at_min: str | None = None
    updated_at_max: str | None = None


class CustomerIdArgs(FormattedArguments):
    customer_id: int = Field(description="Customer ID")


class DeleteCustomerArgs(ToolArguments):
    customer_id: int


class CustomerAddress(ToolArguments):
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province: str | None = None
    country: str | None = None
    zip: str | None = None
    phone: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    default: bool | None = None


class CreateCustomerArgs(ToolArguments):
    email: str = Field(description="Customer email (required)")
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    note: str | None = None
    tags: str | None = None
    accepts_marketing: bool | None = None
    addresses: list[CustomerAddress] | None = None
    send_email_welcome: bool | None = None
    send_email_invite: bool | None = None


class UpdateCustomerArgs(ToolArguments):
    customer_id: int
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    note: str | None = None
    tags: str | None = None
    accepts_marketing: bool | None = None


class SearchCustomersArgs(PageArguments):
    query: str = Field(description="Search query, e.g. 'email:bob@example.com' or 'country:Canada'")
    order: str | None = Field(default=None, description="Sort order, e.g. 'last_order_date DESC'")


class CustomerOrdersArgs(PageArguments):
    customer_id: int
    status: Literal["any", "open", "closed", "cancelled"] | None = None


CUSTOMER_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_customers",
        description="List customers with pagination and date filters.",
        arguments=ListCustomersArgs,
        run=lambda client, args: list_customers(client, args.payload()),
        render=formatted("customers"),
    ),
    ToolDefinition(
        name="shopify_get_customer",
        description="Get a single customer by ID.",
        arguments=CustomerIdArgs,
        run=lambda client, args: get_customer(client, args.customer_id),
        render=formatted("customer"),
    ),
    ToolDefinition(
        name="shopify_create_customer",
        description="Create a new customer. Email is required.",
        arguments=CreateCustomerArgs,
        run=lambda client, args: create_customer(client, args.payload()),
        render=mutated("Customer created", "customer"),
    ),
    ToolDefinition(
        name="shopify_update_customer",
        description="Update an existing customer.",
        arguments=UpdateCustomerArgs,
        run=lambda client, args: update_customer(
            client, args.customer_id, args.payload("customer_id")
        ),
        render=mutated("Customer updated", "customer"),
    ),
    ToolDefinition(
        name="shopify_delete_customer",
        description="Delete a customer. Customers with existing orders cannot be deleted.",
        arguments=DeleteCustomerArgs,
        run=lambda client, args: delete_customer(client, args.customer_id),
        render=deleted("Customer {customer_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_get_customer_count",
        description="Get the count of customers, optionally within a date range.",
        arguments=DateRangeFilters,
        run=lambda client, args: count_customers(client, args.payload()),
        render=counted,
    ),
    ToolDefinition(
        name="shopify_search_customers",
        description="Search customers using Shopify's query syntax.",
        arguments=SearchCustomersArgs,
        run=lambda client, args: search_customers(client, args.payload()),
        render=formatted("customers"),
    ),
    ToolDefinition(
        name="shopify_get_customer_orders",
        description="List the orders placed by a customer.",
        arguments=CustomerOrdersArgs,
        run=lambda client, args: list_customer_orders(
            client, args.customer_id, args.payload("customer_id")
        ),
        render=formatted("orders"),
    ),
]
