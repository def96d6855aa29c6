"""
Tests for the tool registry and the per-domain tools.

Each tool is driven through ShopifyMcpAdapter.call_tool against the mock
transport, checking the request that reaches Shopify and the rendered result.
"""

import json

import pytest

from shopify_mcp.domains import ALL_TOOLS
from shopify_mcp.errors import ToolValidationError

from conftest import MOCK_PRODUCT


def _tool(name):
    return next(t for t in ALL_TOOLS if t.name == name)


def _json(result):
    return json.loads(result.text)


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------


class TestRegistry:
    def test_names_unique(self):
        names = [t.name for t in ALL_TOOLS]
        assert len(names) == len(set(names)), "Duplicate tool names"

    def test_naming_convention(self):
        for tool in ALL_TOOLS:
            assert tool.name.startswith("shopify_"), tool.name

    def test_all_tools_have_descriptions(self):
        for tool in ALL_TOOLS:
            assert tool.description, f"{tool.name} missing description"

    def test_every_group_registered(self):
        names = {t.name for t in ALL_TOOLS}
        for expected in [
            "shopify_test_connection",
            "shopify_list_products",
            "shopify_list_smart_collections",
            "shopify_cancel_order",
            "shopify_search_customers",
            "shopify_set_inventory_level",
            "shopify_update_fulfillment_tracking",
            "shopify_send_draft_order_invoice",
            "shopify_calculate_refund",
            "shopify_create_discount_code",
            "shopify_get_webhook_count",
            "shopify_create_or_update_asset",
            "shopify_create_shop_metafield",
        ]:
            assert expected in names
        assert len(names) >= 110

    def test_schemas_are_camel_case(self):
        schema = _tool("shopify_list_products").to_mcp_tool().inputSchema

        assert "sinceId" in schema.properties
        assert "productType" in schema.properties
        assert schema.properties["limit"]["maximum"] == 250
        assert schema.properties["format"]["default"] == "json"
        assert schema.required == []

    def test_unknown_arguments_rejected_in_schema(self):
        dumped = _tool("shopify_get_product").to_mcp_tool().inputSchema.model_dump()

        assert dumped["additionalProperties"] is False
        assert dumped["required"] == ["productId"]
        assert "title" not in dumped

    def test_argument_names(self):
        schema = _tool("shopify_send_draft_order_invoice").to_mcp_tool().inputSchema
        names = list(schema.properties)
        assert names == ["draftOrderId", "to", "from", "subject", "customMessage"]


# -----------------------------------------------------------------------------
# Argument Validation
# -----------------------------------------------------------------------------


class TestArgumentValidation:
    def test_missing_required(self):
        with pytest.raises(ToolValidationError) as exc_info:
            _tool("shopify_get_product").parse_arguments({})

        assert exc_info.value.tool_name == "shopify_get_product"
        assert any("productId" in error for error in exc_info.value.errors)

    def test_unknown_argument(self):
        with pytest.raises(ToolValidationError):
            _tool("shopify_get_shop").parse_arguments({"bogus": 1})

    def test_limit_bounds(self):
        tool = _tool("shopify_list_orders")
        with pytest.raises(ToolValidationError):
            tool.parse_arguments({"limit": 251})
        with pytest.raises(ToolValidationError):
            tool.parse_arguments({"limit": 0})
        assert tool.parse_arguments({"limit": 250}).limit == 250

    def test_enum_checked(self):
        with pytest.raises(ToolValidationError):
            _tool("shopify_list_orders").parse_arguments({"status": "shipped"})

    def test_snake_case_names_also_accepted(self):
        args = _tool("shopify_get_product").parse_arguments({"product_id": 5})
        assert args.product_id == 5


# -----------------------------------------------------------------------------
# Shop
# -----------------------------------------------------------------------------


class TestShopTools:
    @pytest.mark.asyncio
    async def test_connection_ok(self, adapter, client):
        result = await adapter.call_tool("shopify_test_connection", {}, client)

        data = _json(result)
        assert data["connected"] is True
        assert data["shopName"] == "John Smith Test Store"

    @pytest.mark.asyncio
    async def test_connection_bad_token(self, adapter, client, mock_transport):
        mock_transport.add("GET", "/shop.json", 401, {"errors": "bad"})

        result = await adapter.call_tool("shopify_test_connection", {}, client)

        assert not result.isError
        assert _json(result) == {"connected": False, "message": "Invalid access token"}

    @pytest.mark.asyncio
    async def test_get_shop_markdown(self, adapter, client):
        result = await adapter.call_tool("shopify_get_shop", {"format": "markdown"}, client)

        assert result.text.startswith("## Shop")
        assert "**Myshopify Domain:** test-shop.myshopify.com" in result.text


# -----------------------------------------------------------------------------
# Products
# -----------------------------------------------------------------------------


class TestProductTools:
    @pytest.mark.asyncio
    async def test_list_products(self, adapter, client, mock_transport):
        result = await adapter.call_tool(
            "shopify_list_products", {"limit": 1, "productType": "Cult Products"}, client
        )

        params = mock_transport.last_request.url.params
        assert params["limit"] == "1"
        assert params["product_type"] == "Cult Products"
        assert "format" not in params

        page = _json(result)
        assert page["count"] == 1
        assert page["hasMore"] is True
        assert page["items"][0]["productType"] == "Cult Products"

    @pytest.mark.asyncio
    async def test_get_product(self, adapter, client):
        result = await adapter.call_tool(
            "shopify_get_product", {"productId": MOCK_PRODUCT["id"]}, client
        )
        assert _json(result)["title"] == "IPod Nano - 8GB"

    @pytest.mark.asyncio
    async def test_create_product(self, adapter, client, mock_transport):
        mock_transport.add("POST", "/products.json", 201, {"product": {"id": 1, "title": "Hat"}})

        result = await adapter.call_tool(
            "shopify_create_product",
            {"title": "Hat", "bodyHtml": "<p>Warm</p>", "variants": [{"price": "10.00"}]},
            client,
        )

        assert mock_transport.last_json() == {
            "product": {
                "title": "Hat",
                "body_html": "<p>Warm</p>",
                "variants": [{"price": "10.00"}],
            }
        }
        assert _json(result) == {
            "success": True,
            "message": "Product created",
            "product": {"id": 1, "title": "Hat"},
        }

    @pytest.mark.asyncio
    async def test_delete_product(self, adapter, client, mock_transport):
        mock_transport.add("DELETE", "/products/7.json", 200, {})

        result = await adapter.call_tool("shopify_delete_product", {"productId": 7}, client)

        assert mock_transport.last_request.method == "DELETE"
        assert _json(result) == {"success": True, "message": "Product 7 deleted"}

    @pytest.mark.asyncio
    async def test_count(self, adapter, client, mock_transport):
        mock_transport.add("GET", "/products/count.json", 200, {"count": 12})

        result = await adapter.call_tool("shopify_get_product_count", {"vendor": "Acme"}, client)

        assert _json(result) == {"count": 12}
        assert mock_transport.last_request.url.params["vendor"] == "Acme"

    @pytest.mark.asyncio
    async def test_not_found_is_error_envelope(self, adapter, client):
        result = await adapter.call_tool("shopify_get_product", {"productId": 1}, client)

        assert result.isError
        envelope = _json(result)
        assert envelope["error"] == "Error: Resource not found"
        assert envelope["details"]["statusCode"] == 404


# -----------------------------------------------------------------------------
# Orders & Draft Orders
# -----------------------------------------------------------------------------


class TestOrderTools:
    @pytest.mark.asyncio
    async def test_cancel_without_options_sends_no_body(self, adapter, client, mock_transport):
        mock_transport.add("POST", "/orders/5/cancel.json", 200, {"order": {"id": 5}})

        result = await adapter.call_tool("shopify_cancel_order", {"orderId": 5}, client)

        assert mock_transport.last_request.content == b""
        assert _json(result)["message"] == "Order cancelled"

    @pytest.mark.asyncio
    async def test_cancel_with_reason(self, adapter, client, mock_transport):
        mock_transport.add("POST", "/orders/5/cancel.json", 200, {"order": {"id": 5}})

        await adapter.call_tool(
            "shopify_cancel_order", {"orderId": 5, "reason": "fraud", "restock": True}, client
        )

        assert mock_transport.last_json() == {"reason": "fraud", "restock": True}

    @pytest.mark.asyncio
    async def test_complete_draft_order(self, adapter, client, mock_transport):
        mock_transport.add(
            "PUT", "/draft_orders/3/complete.json", 200, {"draft_order": {"id": 3, "order_id": 9}}
        )

        result = await adapter.call_tool("shopify_complete_draft_order", {"draftOrderId": 3}, client)

        assert mock_transport.last_request.url.params["payment_pending"] == "false"
        assert _json(result)["draftOrder"] == {"id": 3, "orderId": 9}

    @pytest.mark.asyncio
    async def test_send_invoice(self, adapter, client, mock_transport):
        mock_transport.add(
            "POST",
            "/draft_orders/3/send_invoice.json",
            200,
            {"draft_order_invoice": {"to": "bob@example.com"}},
        )

        result = await adapter.call_tool(
            "shopify_send_draft_order_invoice",
            {"draftOrderId": 3, "to": "bob@example.com", "from": "shop@example.com", "customMessage": "Hi"},
            client,
        )

        assert mock_transport.last_json() == {
            "draft_order_invoice": {
                "to": "bob@example.com",
                "from": "shop@example.com",
                "custom_message": "Hi",
            }
        }
        data = _json(result)
        assert data["message"] == "Invoice sent"
        assert data["draftOrderInvoice"] == {"to": "bob@example.com"}


# -----------------------------------------------------------------------------
# Inventory & Fulfillments
# -----------------------------------------------------------------------------


class TestInventoryTools:
    @pytest.mark.asyncio
    async def test_adjust_level(self, adapter, client, mock_transport):
        mock_transport.add(
            "POST", "/inventory_levels/adjust.json", 200, {"inventory_level": {"available": 8}}
        )

        result = await adapter.call_tool(
            "shopify_adjust_inventory_level",
            {"inventoryItemId": 1, "locationId": 2, "adjustment": -2},
            client,
        )

        assert mock_transport.last_json() == {
            "inventory_item_id": 1,
            "location_id": 2,
            "available_adjustment": -2,
        }
        assert _json(result)["level"] == {"available": 8}

    @pytest.mark.asyncio
    async def test_list_levels_raw(self, adapter, client, mock_transport):
        mock_transport.add(
            "GET", "/inventory_levels.json", 200, {"inventory_levels": [{"location_id": 2}]}
        )

        result = await adapter.call_tool(
            "shopify_list_inventory_levels", {"locationIds": "2,3"}, client
        )

        assert mock_transport.last_request.url.params["location_ids"] == "2,3"
        assert _json(result) == [{"locationId": 2}]

    @pytest.mark.asyncio
    async def test_fulfillment_orders_wrapped(self, adapter, client, mock_transport):
        mock_transport.add(
            "GET", "/orders/5/fulfillment_orders.json", 200, {"fulfillment_orders": [{"id": 1}]}
        )

        result = await adapter.call_tool("shopify_list_fulfillment_orders", {"orderId": 5}, client)

        assert _json(result) == {"items": [{"id": 1}], "count": 1, "hasMore": False}


# -----------------------------------------------------------------------------
# Transactions, Discounts, Webhooks
# -----------------------------------------------------------------------------


class TestTransactionTools:
    @pytest.mark.asyncio
    async def test_calculate_refund(self, adapter, client, mock_transport):
        mock_transport.add(
            "POST",
            "/orders/5/refunds/calculate.json",
            200,
            {"refund": {"transactions": [{"parent_id": 1, "amount": "10.00", "kind": "suggested_refund"}]}},
        )

        result = await adapter.call_tool(
            "shopify_calculate_refund",
            {"orderId": 5, "refundLineItems": [{"lineItemId": 9, "quantity": 1, "restockType": "return"}]},
            client,
        )

        assert mock_transport.last_json() == {
            "refund": {"refund_line_items": [{"line_item_id": 9, "quantity": 1, "restock_type": "return"}]}
        }
        data = _json(result)
        assert data["calculated"] is True
        assert data["refund"]["transactions"][0]["parentId"] == 1

    @pytest.mark.asyncio
    async def test_create_refund_notifies_by_default(self, adapter, client, mock_transport):
        mock_transport.add("POST", "/orders/5/refunds.json", 201, {"refund": {"id": 77}})

        await adapter.call_tool(
            "shopify_create_refund",
            {"orderId": 5, "transactions": [{"parentId": 1, "amount": "10.00", "kind": "refund"}]},
            client,
        )

        body = mock_transport.last_json()["refund"]
        assert body["notify"] is True
        assert body["transactions"] == [{"parent_id": 1, "amount": "10.00", "kind": "refund"}]


class TestDiscountTools:
    @pytest.mark.asyncio
    async def test_update_discount_code(self, adapter, client, mock_transport):
        mock_transport.add(
            "PUT", "/price_rules/4/discount_codes/8.json", 200, {"discount_code": {"id": 8, "code": "NEW"}}
        )

        result = await adapter.call_tool(
            "shopify_update_discount_code",
            {"priceRuleId": 4, "discountCodeId": 8, "code": "NEW"},
            client,
        )

        assert mock_transport.last_json() == {"discount_code": {"code": "NEW"}}
        assert _json(result)["message"] == "Discount code updated"

    def test_price_rule_requires_start(self):
        with pytest.raises(ToolValidationError):
            _tool("shopify_create_price_rule").parse_arguments(
                {
                    "title": "Sale",
                    "targetType": "line_item",
                    "targetSelection": "all",
                    "allocationMethod": "across",
                    "valueType": "percentage",
                    "value": "-10.0",
                    "customerSelection": "all",
                }
            )


class TestWebhookTools:
    @pytest.mark.asyncio
    async def test_create_sends_payload_format(self, adapter, client, mock_transport):
        mock_transport.add("POST", "/webhooks.json", 201, {"webhook": {"id": 1}})

        await adapter.call_tool(
            "shopify_create_webhook",
            {"topic": "orders/create", "address": "https://example.com/hook"},
            client,
        )

        assert mock_transport.last_json() == {
            "webhook": {
                "topic": "orders/create",
                "address": "https://example.com/hook",
                "format": "json",
            }
        }

    def test_format_schema_is_payload_encoding(self):
        schema = _tool("shopify_create_webhook").to_mcp_tool().inputSchema
        assert schema.properties["format"]["enum"] == ["json", "xml"]


# -----------------------------------------------------------------------------
# Themes & Metafields
# -----------------------------------------------------------------------------


class TestThemeTools:
    @pytest.mark.asyncio
    async def test_list_themes_markdown(self, adapter, client, mock_transport):
        mock_transport.add(
            "GET", "/themes.json", 200, {"themes": [{"id": 1, "name": "Dawn", "role": "main", "previewable": True}]}
        )

        result = await adapter.call_tool("shopify_list_themes", {"format": "markdown"}, client)

        assert result.text.startswith("## Themes")
        assert "| 1 | Dawn | main | Yes |" in result.text

    @pytest.mark.asyncio
    async def test_list_themes_json_is_plain_array(self, adapter, client, mock_transport):
        mock_transport.add("GET", "/themes.json", 200, {"themes": [{"id": 1}]})

        result = await adapter.call_tool("shopify_list_themes", {}, client)

        assert _json(result) == [{"id": 1}]

    @pytest.mark.asyncio
    async def test_get_asset_by_key(self, adapter, client, mock_transport):
        mock_transport.add(
            "GET", "/themes/1/assets.json", 200, {"asset": {"key": "templates/index.liquid", "value": "x"}}
        )

        result = await adapter.call_tool(
            "shopify_get_asset", {"themeId": 1, "key": "templates/index.liquid"}, client
        )

        assert mock_transport.last_request.url.params["asset[key]"] == "templates/index.liquid"
        assert _json(result)["value"] == "x"

    @pytest.mark.asyncio
    async def test_save_asset(self, adapter, client, mock_transport):
        mock_transport.add("PUT", "/themes/1/assets.json", 200, {"asset": {"key": "a.liquid"}})

        result = await adapter.call_tool(
            "shopify_create_or_update_asset",
            {"themeId": 1, "key": "a.liquid", "sourceKey": "b.liquid"},
            client,
        )

        assert mock_transport.last_json() == {"asset": {"key": "a.liquid", "source_key": "b.liquid"}}
        assert _json(result)["message"] == "Asset saved"

    @pytest.mark.asyncio
    async def test_delete_asset(self, adapter, client, mock_transport):
        mock_transport.add("DELETE", "/themes/1/assets.json", 200, {})

        result = await adapter.call_tool(
            "shopify_delete_asset", {"themeId": 1, "key": "a.liquid"}, client
        )

        assert _json(result)["message"] == "Asset a.liquid deleted"


class TestMetafieldTools:
    @pytest.mark.asyncio
    async def test_list_for_owner(self, adapter, client, mock_transport):
        mock_transport.add(
            "GET", "/products/5/metafields.json", 200, {"metafields": [{"id": 1, "namespace": "custom"}]}
        )

        result = await adapter.call_tool(
            "shopify_list_metafields",
            {"ownerResource": "products", "ownerId": 5, "namespace": "custom"},
            client,
        )

        params = mock_transport.last_request.url.params
        assert params["namespace"] == "custom"
        assert "owner_id" not in params
        assert _json(result)["items"] == [{"id": 1, "namespace": "custom"}]

    @pytest.mark.asyncio
    async def test_update(self, adapter, client, mock_transport):
        mock_transport.add("PUT", "/customers/2/metafields/9.json", 200, {"metafield": {"id": 9}})

        await adapter.call_tool(
            "shopify_update_metafield",
            {"ownerResource": "customers", "ownerId": 2, "metafieldId": 9, "value": "gold"},
            client,
        )

        assert mock_transport.last_json() == {"metafield": {"value": "gold"}}

    @pytest.mark.asyncio
    async def test_create_shop_metafield(self, adapter, client, mock_transport):
        mock_transport.add("POST", "/metafields.json", 201, {"metafield": {"id": 3}})

        result = await adapter.call_tool(
            "shopify_create_shop_metafield",
            {"namespace": "custom", "key": "tier", "value": "gold", "type": "single_line_text_field"},
            client,
        )

        assert _json(result) == {
            "success": True,
            "message": "Shop metafield created",
            "metafield": {"id": 3},
        }
