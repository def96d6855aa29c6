"""
Webhooks Domain

Webhook subscriptions notify an external address when store events happen
(``orders/create``, ``products/update``, ...).
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


async def list_webhooks(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/webhooks.json", "webhooks", params)


async def get_webhook(client: ShopifyClient, webhook_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/webhooks/{webhook_id}.json", "webhook")


async def create_webhook(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/webhooks.json", "webhook", data)


async def update_webhook(
    client: ShopifyClient, webhook_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(f"/webhooks/{webhook_id}.json", "webhook", data)


async def delete_webhook(client: ShopifyClient, webhook_id: int) -> None:
    await client.delete_resource(f"/webhooks/{webhook_id}.json")


async def count_webhooks(client: ShopifyClient, params: dict[str, Any] | None = None) -> int:
    return await client.count_resource("/webhooks/count.json", params)


class ListWebhooksArgs(PageArguments):
    since_id: str | None = None
    topic: str | None = Field(default=None, description="Filter by topic, e.g. orders/create")
    address: str | None = Field(default=None, description="Filter by callback URL")


class WebhookIdArgs(FormattedArguments):
    webhook_id: int = Field(description="Webhook ID")


class CreateWebhookArgs(ToolArguments):
    topic: str = Field(description="Event topic, e.g. orders/create")
    address: str = Field(description="HTTPS URL that receives the events")
    # Payload encoding; distinct from the response ``format`` of read tools.
    webhook_format: Literal["json", "xml"] = Field(default="json", alias="format")
    fields: list[str] | None = Field(default=None, description="Fields to include in payloads")
    metafield_namespaces: list[str] | None = None


class UpdateWebhookArgs(ToolArguments):
    webhook_id: int
    address: str | None = None
    webhook_format: Literal["json", "xml"] | None = Field(default=None, alias="format")
    fields: list[str] | None = None
    metafield_namespaces: list[str] | None = None


class DeleteWebhookArgs(ToolArguments):
    webhook_id: int


class CountWebhooksArgs(ToolArguments):
    topic: str | None = None
    address: str | None = None


WEBHOOK_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_webhooks",
        description="List webhook subscriptions, optionally filtered by topic or address.",
        arguments=ListWebhooksArgs,
        run=lambda client, args: list_webhooks(client, args.payload()),
        render=formatted("webhooks"),
    ),
    ToolDefinition(
        name="shopify_get_webhook",
        description="Get a webhook subscription by ID.",
        arguments=WebhookIdArgs,
        run=lambda client, args: get_webhook(client, args.webhook_id),
        render=formatted("webhook"),
    ),
    ToolDefinition(
        name="shopify_create_webhook",
        description="Subscribe an HTTPS address to a webhook topic.",
        arguments=CreateWebhookArgs,
        run=lambda client, args: create_webhook(client, args.payload()),
        render=mutated("Webhook created", "webhook"),
    ),
    ToolDefinition(
        name="shopify_update_webhook",
        description="Update a webhook subscription's address, format or fields.",
        arguments=UpdateWebhookArgs,
        run=lambda client, args: update_webhook(
            client, args.webhook_id, args.payload("webhook_id")
        ),
        render=mutated("Webhook updated", "webhook"),
    ),
    ToolDefinition(
        name="shopify_delete_webhook",
        description="Delete a webhook subscription.",
        arguments=DeleteWebhookArgs,
        run=lambda client, args: delete_webhook(client, args.webhook_id),
        render=deleted("Webhook {webhook_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_get_webhook_count",
        description="Count webhook subscriptions, optionally filtered by topic or address.",
        arguments=CountWebhooksArgs,
        run=lambda client, args: count_webhooks(client, args.payload()),
        render=counted,
    ),
]
