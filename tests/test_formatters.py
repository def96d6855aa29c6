"""
Tests for JSON/Markdown rendering of tool results and failures.
"""

import json

from shopify_mcp.errors import ApiError, RateLimitError, TransportFailure
from shopify_mcp.formatters import (
    EMPTY_PAGE_MARKER,
    EMPTY_TABLE_MARKER,
    format_as_markdown,
    format_error,
    format_generic_table,
    format_key,
    format_response,
    format_themes_as_markdown,
)
from shopify_mcp.pagination import create_paginated_response, wrap_items


class TestFormatResponse:
    def test_json_is_indented(self):
        result = format_response({"id": 1, "title": "Hat"}, "json", "product")

        assert not result.isError
        assert result.content[0].type == "text"
        assert result.text == json.dumps({"id": 1, "title": "Hat"}, indent=2)

    def test_json_page_drops_unset_fields(self):
        page = create_paginated_response([{"id": 1}], 50)

        data = json.loads(format_response(page, "json", "products").text)

        assert data == {"items": [{"id": 1}], "count": 1, "hasMore": False}

    def test_markdown_selected(self):
        result = format_response({"id": 1}, "markdown", "product")
        assert result.text.startswith("## Product")


class TestPaginatedMarkdown:
    def test_empty_page(self):
        text = format_as_markdown(create_paginated_response([], 50), "products")

        assert text.startswith("## Products")
        assert "**Showing:** 0" in text
        assert EMPTY_PAGE_MARKER in text

    def test_products_table(self):
        page = create_paginated_response(
            [{"id": 1, "title": "Hat", "vendor": "Acme", "status": "active", "variants": [{}, {}]}],
            50,
        )

        text = format_as_markdown(page, "products")

        assert "| ID | Title | Vendor | Status | Variants |" in text
        assert "| 1 | Hat | Acme | active | 2 |" in text

    def test_more_available_with_cursor(self):
        page = create_paginated_response([{"id": 1}], 1, next_cursor="abc")

        text = format_as_markdown(page, "things")

        assert "**More available:** Yes (cursor: `abc`)" in text

    def test_more_available_without_cursor(self):
        page = create_paginated_response([{"id": 1}], 1)

        text = format_as_markdown(page, "things")

        assert "**More available:** Yes" in text
        assert "cursor" not in text

    def test_total_shown_when_known(self):
        page = create_paginated_response([{"id": 1}], 10, total=42)
        assert "**Total:** 42 | **Showing:** 1" in format_as_markdown(page, "things")

    def test_order_customer_name(self):
        page = wrap_items(
            [
                {
                    "id": 9,
                    "name": "#1001",
                    "customer": {"firstName": "Bob", "lastName": "Norman"},
                    "currency": "USD",
                    "totalPrice": "10.00",
                    "financialStatus": "paid",
                    "createdAt": "2024-01-01",
                }
            ]
        )

        text = format_as_markdown(page, "orders")

        assert "| 9 | #1001 | Bob Norman | USD 10.00 | paid | 2024-01-01 |" in text

    def test_percentage_price_rule(self):
        page = wrap_items([{"id": 1, "title": "Sale", "valueType": "percentage", "value": "-10.0"}])
        assert "-10.0%" in format_as_markdown(page, "priceRules")


class TestGenericTable:
    def test_at_most_five_columns(self):
        item = {f"k{i}": i for i in range(8)}

        text = format_generic_table([item])

        header = text.splitlines()[0]
        assert header == "| k0 | k1 | k2 | k3 | k4 |"

    def test_missing_values_dash(self):
        text = format_generic_table([{"a": 1, "b": 2}, {"a": 3}])
        assert "| 3 | - |" in text

    def test_empty(self):
        assert format_generic_table([]) == EMPTY_TABLE_MARKER


class TestObjectMarkdown:
    def test_nested_values_in_json_blocks(self):
        order = {
            "id": 1,
            "name": "#1001",
            "lineItems": [{"title": "Hat", "quantity": 1}],
            "note": None,
        }

        text = format_as_markdown(order, "order")

        assert text.startswith("## Order")
        assert "**Id:** 1" in text
        assert "**Line Items:**\n```json" in text
        assert '"quantity": 1' in text
        assert "Note" not in text

    def test_plural_entity_singularized(self):
        assert format_as_markdown({"id": 1}, "webhooks").startswith("## Webhook\n")

    def test_booleans_lowercase(self):
        assert "**Taxable:** true" in format_as_markdown({"taxable": True}, "variant")

    def test_format_key(self):
        assert format_key("totalPrice") == "Total Price"
        assert format_key("id") == "Id"


class TestArrayMarkdown:
    def test_themes(self):
        themes = [{"id": 1, "name": "Dawn", "role": "main", "previewable": True}]

        text = format_as_markdown(themes, "themes")

        assert text == format_themes_as_markdown(themes)
        assert "| 1 | Dawn | main | Yes |" in text

    def test_no_themes(self):
        text = format_as_markdown([], "themes")

        assert text.startswith("## Themes")
        assert EMPTY_TABLE_MARKER in text
        assert "| ID |" not in text

    def test_other_arrays_use_generic_table(self):
        text = format_as_markdown([{"available": 5, "locationId": 2}], "inventoryLevels")
        assert "| available | locationId |" in text


class TestFormatError:
    def test_envelope(self):
        result = format_error(ApiError("Resource not found", 404))

        assert result.isError
        envelope = json.loads(result.text)
        assert envelope["error"] == "Error: Resource not found"
        assert envelope["details"]["statusCode"] == 404
        assert envelope["details"]["retryable"] is False
        assert envelope["details"]["type"] == "ApiError"

    def test_retryable_suffix(self):
        envelope = json.loads(format_error(ApiError("boom", 503)).text)
        assert envelope["error"] == "Error: boom (retryable)"

    def test_rate_limit_details(self):
        envelope = json.loads(format_error(RateLimitError(retry_after=30)).text)

        assert envelope["error"].endswith("(retryable)")
        assert envelope["details"]["retryAfter"] == 30
        assert envelope["details"]["category"] == "rate_limited"

    def test_non_api_failure(self):
        envelope = json.loads(format_error(TransportFailure("timed out")).text)

        assert envelope["error"] == "Error: timed out"
        assert "statusCode" not in envelope["details"]
        assert envelope["details"]["category"] == "transport_failure"
