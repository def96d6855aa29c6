"""
Discounts Domain

Price rules define a discount's logic; discount codes are the codes
customers type at checkout, each attached to one price rule.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ..client import ShopifyClient
from ..pagination import PaginatedResponse, wrap_items
from ..tools import (
    FormattedArguments,
    PageArguments,
    ToolArguments,
    ToolDefinition,
    deleted,
    formatted,
    mutated,
)


async def list_price_rules(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/price_rules.json", "priceRules", params)


async def get_price_rule(client: ShopifyClient, price_rule_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/price_rules/{price_rule_id}.json", "priceRule")


async def create_price_rule(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/price_rules.json", "priceRule", data)


async def update_price_rule(
    client: ShopifyClient, price_rule_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(f"/price_rules/{price_rule_id}.json", "priceRule", data)


async def delete_price_rule(client: ShopifyClient, price_rule_id: int) -> None:
    await client.delete_resource(f"/price_rules/{price_rule_id}.json")


async def list_discount_codes(client: ShopifyClient, price_rule_id: int) -> list[dict[str, Any]]:
    return await client.list_all(
        f"/price_rules/{price_rule_id}/discount_codes.json", "discountCodes"
    )


async def get_discount_code(
    client: ShopifyClient, price_rule_id: int, discount_code_id: int
) -> dict[str, Any]:
    return await client.get_resource(
        f"/price_rules/{price_rule_id}/discount_codes/{discount_code_id}.json", "discountCode"
    )


async def create_discount_code(
    client: ShopifyClient, price_rule_id: int, code: str
) -> dict[str, Any]:
    return await client.create_resource(
        f"/price_rules/{price_rule_id}/discount_codes.json", "discountCode", {"code": code}
    )


async def update_discount_code(
    client: ShopifyClient, price_rule_id: int, discount_code_id: int, code: str
) -> dict[str, Any]:
    return await client.update_resource(
        f"/price_rules/{price_rule_id}/discount_codes/{discount_code_id}.json",
        "discountCode",
        {"code": code},
    )


async def delete_discount_code(
    client: ShopifyClient, price_rule_id: int, discount_code_id: int
) -> None:
    await client.delete_resource(
        f"/price_rules/{price_rule_id}/discount_codes/{discount_code_id}.json"
    )


class ListPriceRulesArgs(PageArguments):
    since_id: str | None = None
    starts_at: str | None = Field(default=None, description="Filter by start date")
    ends_at: str | None = Field(default=None, description="Filter by end date")


class PriceRuleIdArgs(FormattedArguments):
    price_rule_id: int = Field(description="Price rule ID")


class SubtotalRange(ToolArguments):
    greater_than_or_equal_to: str


class QuantityRange(ToolArguments):
    greater_than_or_equal_to: int


class EntitlementRatio(ToolArguments):
    prerequisite_quantity: int | None = None
    entitled_quantity: int | None = None


class CreatePriceRuleArgs(ToolArguments):
    title: str = Field(description="Internal name of the price rule")
    target_type: Literal["line_item", "shipping_line"]
    target_selection: Literal["all", "entitled"]
    allocation_method: Literal["across", "each"]
    value_type: Literal["fixed_amount", "percentage"]
    value: str = Field(description="Discount value as a negative number, e.g. '-10.0'")
    customer_selection: Literal["all", "prerequisite"]
    starts_at: str = Field(description="ISO 8601 start date")
    ends_at: str | None = None
    once_per_customer: bool | None = None
    usage_limit: int | None = None
    prerequisite_subtotal_range: SubtotalRange | None = None
    prerequisite_quantity_range: QuantityRange | None = None
    prerequisite_to_entitlement_quantity_ratio: EntitlementRatio | None = None
    entitled_product_ids: list[int] | None = None
    entitled_variant_ids: list[int] | None = None
    entitled_collection_ids: list[int] | None = None
    entitled_country_ids: list[int] | None = None
    prerequisite_product_ids: list[int] | None = None
    prerequisite_variant_ids: list[int] | None = None
    prerequisite_collection_ids: list[int] | None = None
    prerequisite_customer_ids: list[int] | None = None


class UpdatePriceRuleArgs(ToolArguments):
    price_rule_id: int
    title: str | None = None
    value: str | None = None
    starts_at: str | None = None
    ends_at: str | None = None
    usage_limit: int | None = None
    once_per_customer: bool | None = None


class DeletePriceRuleArgs(ToolArguments):
    price_rule_id: int


class DiscountCodeIdArgs(FormattedArguments):
    price_rule_id: int
    discount_code_id: int


class CreateDiscountCodeArgs(ToolArguments):
    price_rule_id: int
    code: str = Field(description="Code customers enter at checkout")


class UpdateDiscountCodeArgs(ToolArguments):
    price_rule_id: int
    discount_code_id: int
    code: str


class DeleteDiscountCodeArgs(ToolArguments):
    price_rule_id: int
    discount_code_id: int


async def _discount_codes_page(client: ShopifyClient, price_rule_id: int) -> PaginatedResponse:
    return wrap_items(await list_discount_codes(client, price_rule_id))


DISCOUNT_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_price_rules",
        description="List price rules (discount definitions).",
        arguments=ListPriceRulesArgs,
        run=lambda client, args: list_price_rules(client, args.payload()),
        render=formatted("priceRules"),
    ),
    ToolDefinition(
        name="shopify_get_price_rule",
        description="Get a price rule by ID.",
        arguments=PriceRuleIdArgs,
        run=lambda client, args: get_price_rule(client, args.price_rule_id),
        render=formatted("priceRule"),
    ),
    ToolDefinition(
        name="shopify_create_price_rule",
        description=(
            "Create a price rule. Value is negative, e.g. '-10.0' with valueType "
            "'percentage' for 10% off. Add codes with shopify_create_discount_code."
        ),
        arguments=CreatePriceRuleArgs,
        run=lambda client, args: create_price_rule(client, args.payload()),
        render=mutated("Price rule created", "priceRule"),
    ),
    ToolDefinition(
        name="shopify_update_price_rule",
        description="Update a price rule.",
        arguments=UpdatePriceRuleArgs,
        run=lambda client, args: update_price_rule(
            client, args.price_rule_id, args.payload("price_rule_id")
        ),
        render=mutated("Price rule updated", "priceRule"),
    ),
    ToolDefinition(
        name="shopify_delete_price_rule",
        description="Delete a price rule and all of its discount codes.",
        arguments=DeletePriceRuleArgs,
        run=lambda client, args: delete_price_rule(client, args.price_rule_id),
        render=deleted("Price rule {price_rule_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_list_discount_codes",
        description="List the discount codes of a price rule.",
        arguments=PriceRuleIdArgs,
        run=lambda client, args: _discount_codes_page(client, args.price_rule_id),
        render=formatted("discountCodes"),
    ),
    ToolDefinition(
        name="shopify_get_discount_code",
        description="Get a discount code.",
        arguments=DiscountCodeIdArgs,
        run=lambda client, args: get_discount_code(
            client, args.price_rule_id, args.discount_code_id
        ),
        render=formatted("discountCode"),
    ),
    ToolDefinition(
        name="shopify_create_discount_code",
        description="Create a discount code for a price rule.",
        arguments=CreateDiscountCodeArgs,
        run=lambda client, args: create_discount_code(client, args.price_rule_id, args.code),
        render=mutated("Discount code created", "discountCode"),
    ),
    ToolDefinition(
        name="shopify_update_discount_code",
        description="Change the code of a discount code.",
        arguments=UpdateDiscountCodeArgs,
        run=lambda client, args: update_discount_code(
            client, args.price_rule_id, args.discount_code_id, args.code
        ),
        render=mutated("Discount code updated", "discountCode"),
    ),
    ToolDefinition(
        name="shopify_delete_discount_code",
        description="Delete a discount code.",
        arguments=DeleteDiscountCodeArgs,
        run=lambda client, args: delete_discount_code(
            client, args.price_rule_id, args.discount_code_id
        ),
        render=deleted("Discount code {discount_code_id} deleted"),
    ),
]
