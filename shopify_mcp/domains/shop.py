"""
Shop Domain

Store-level information and a connectivity check.
"""

from __future__ import annotations

from typing import Any

from ..client import ShopifyClient
from ..errors import GatewayFailure
from ..tools import FormattedArguments, ToolArguments, ToolDefinition, formatted, raw


async def get_shop(client: ShopifyClient) -> dict[str, Any]:
    return await client.get_resource("/shop.json", "shop")


async def check_connection(client: ShopifyClient) -> dict[str, Any]:
    """Fetch the shop and report whether the credentials work."""
    try:
        shop = await get_shop(client)
    except GatewayFailure as e:
        return {"connected": False, "message": str(e)}

    name = (shop or {}).get("name")
    return {"connected": True, "message": f"Connected to {name}", "shopName": name}


SHOP_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_test_connection",
        description=(
            "Test the connection to the Shopify store. Verifies that the API "
            "credentials are valid and returns the shop name if successful."
        ),
        arguments=ToolArguments,
        run=lambda client, args: check_connection(client),
        render=raw,
    ),
    ToolDefinition(
        name="shopify_get_shop",
        description=(
            "Get shop information: name, email, domain, currency, timezone, "
            "plan, and address."
        ),
        arguments=FormattedArguments,
        run=lambda client, args: get_shop(client),
        render=formatted("shop"),
    ),
]
