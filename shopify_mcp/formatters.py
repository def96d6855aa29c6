"""
Response Formatting

Turns tool results into MCP content blocks, either as pretty-printed JSON or
as a Markdown summary meant for people reading the conversation.

Markdown rendering picks a table layout by entity tag (``products``,
``orders``, ...) and falls back to a generic table built from the first
item's keys.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from .entities import (
    Customer,
    DraftOrder,
    Fulfillment,
    Location,
    Order,
    PriceRule,
    Product,
    ResponseFormat,
    Theme,
    Webhook,
)
from .errors import ApiError, format_error_for_logging
from .models import TextContent, ToolCallResult

GENERIC_TABLE_MAX_COLUMNS = 5
EMPTY_PAGE_MARKER = "_No items found._"
EMPTY_TABLE_MARKER = "_No items_"


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------


def format_response(data: Any, fmt: ResponseFormat, entity_type: str) -> ToolCallResult:
    """Render a successful result as JSON or Markdown."""
    plain = to_plain(data)
    if fmt == "markdown":
        text = format_as_markdown(plain, entity_type)
    else:
        text = to_json(plain)
    return ToolCallResult(content=[TextContent(text=text)])


def format_error(error: BaseException) -> ToolCallResult:
    """Render a failure as the ``{error, details}`` envelope with isError set."""
    message = f"Error: {error}"
    if isinstance(error, ApiError) and error.retryable:
        message += " (retryable)"

    envelope = {"error": message, "details": format_error_for_logging(error)}
    return ToolCallResult(content=[TextContent(text=to_json(envelope))], isError=True)


def to_plain(data: Any) -> Any:
    """Unwrap pydantic envelopes into plain dicts, dropping unset optional fields."""
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return data


def to_json(data: Any) -> str:
    return json.dumps(to_plain(data), indent=2, ensure_ascii=False)


def format_as_markdown(data: Any, entity_type: str) -> str:
    data = to_plain(data)
    if is_paginated(data):
        return format_paginated_as_markdown(data, entity_type)
    if isinstance(data, list):
        return format_array_as_markdown(data, entity_type)
    if isinstance(data, dict):
        return format_object_as_markdown(data, entity_type)
    return _display(data)


def is_paginated(data: Any) -> bool:
    return isinstance(data, dict) and isinstance(data.get("items"), list)


# -----------------------------------------------------------------------------
# Lists
# -----------------------------------------------------------------------------


def format_paginated_as_markdown(data: dict[str, Any], entity_type: str) -> str:
    items = data["items"]
    count = data.get("count", len(items))
    lines = [f"## {_capitalize(entity_type)}", ""]

    if data.get("total") is not None:
        lines.append(f"**Total:** {data['total']} | **Showing:** {count}")
    else:
        lines.append(f"**Showing:** {count}")

    if data.get("hasMore"):
        cursor = data.get("nextCursor")
        if cursor:
            lines.append(f"**More available:** Yes (cursor: `{cursor}`)")
        else:
            lines.append("**More available:** Yes")
    lines.append("")

    if not items:
        lines.append(EMPTY_PAGE_MARKER)
        return "\n".join(lines)

    renderer = TABLE_RENDERERS.get(entity_type, format_generic_table)
    lines.append(renderer(items))
    return "\n".join(lines)


def format_array_as_markdown(data: list[Any], entity_type: str) -> str:
    if entity_type == "themes":
        return format_themes_as_markdown(data)
    return format_generic_table(data)


def _table(headers: list[str], rows: list[list[Any]]) -> str:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_display(cell) for cell in row) + " |")
    return "\n".join(lines)


def _customer_name(customer: dict[str, Any] | None) -> Any:
    if not customer:
        return "-"
    name = f"{customer.get('firstName') or ''} {customer.get('lastName') or ''}".strip()
    return name or customer.get("email")


def format_products_table(products: list[Product]) -> str:
    return _table(
        ["ID", "Title", "Vendor", "Status", "Variants"],
        [
            [
                p.get("id"),
                p.get("title"),
                p.get("vendor") or "-",
                p.get("status") or "-",
                len(p.get("variants") or []),
            ]
            for p in products
        ],
    )


def format_orders_table(orders: list[Order]) -> str:
    return _table(
        ["ID", "Order #", "Customer", "Total", "Status", "Created"],
        [
            [
                o.get("id"),
                o.get("orderNumber") or o.get("name"),
                _customer_name(o.get("customer")),
                f"{o.get('currency') or '$'} {o.get('totalPrice') or '0'}",
                o.get("financialStatus") or "-",
                o.get("createdAt") or "-",
            ]
            for o in orders
        ],
    )


def format_customers_table(customers: list[Customer]) -> str:
    rows = []
    for c in customers:
        name = f"{c.get('firstName') or ''} {c.get('lastName') or ''}".strip() or "-"
        rows.append(
            [
                c.get("id"),
                name,
                c.get("email") or "-",
                c.get("ordersCount") or 0,
                c.get("totalSpent") or "0",
            ]
        )
    return _table(["ID", "Name", "Email", "Orders", "Total Spent"], rows)


def format_draft_orders_table(draft_orders: list[DraftOrder]) -> str:
    return _table(
        ["ID", "Name", "Customer", "Total", "Status", "Created"],
        [
            [
                d.get("id"),
                d.get("name"),
                _customer_name(d.get("customer")),
                d.get("totalPrice") or "0",
                d.get("status") or "-",
                d.get("createdAt") or "-",
            ]
            for d in draft_orders
        ],
    )


def format_fulfillments_table(fulfillments: list[Fulfillment]) -> str:
    return _table(
        ["ID", "Order ID", "Status", "Tracking #", "Created"],
        [
            [
                f.get("id"),
                f.get("orderId") or "-",
                f.get("status") or "-",
                f.get("trackingNumber") or "-",
                f.get("createdAt") or "-",
            ]
            for f in fulfillments
        ],
    )


def format_locations_table(locations: list[Location]) -> str:
    return _table(
        ["ID", "Name", "City", "Country", "Active"],
        [
            [
                loc.get("id"),
                loc.get("name"),
                loc.get("city") or "-",
                loc.get("countryCode") or "-",
                "Yes" if loc.get("active") else "No",
            ]
            for loc in locations
        ],
    )


def format_webhooks_table(webhooks: list[Webhook]) -> str:
    return _table(
        ["ID", "Topic", "Address", "Format"],
        [
            [w.get("id"), w.get("topic"), w.get("address"), w.get("format") or "-"]
            for w in webhooks
        ],
    )


def format_price_rules_table(price_rules: list[PriceRule]) -> str:
    rows = []
    for rule in price_rules:
        value = _display(rule.get("value"))
        if rule.get("valueType") == "percentage":
            value += "%"
        rows.append(
            [
                rule.get("id"),
                rule.get("title"),
                rule.get("targetType") or "-",
                value,
                rule.get("startsAt") or "-",
                rule.get("endsAt") or "-",
            ]
        )
    return _table(["ID", "Title", "Target Type", "Value", "Starts", "Ends"], rows)


def format_themes_as_markdown(themes: list[Theme]) -> str:
    if not themes:
        return f"## Themes\n\n{EMPTY_TABLE_MARKER}"

    table = _table(
        ["ID", "Name", "Role", "Previewable"],
        [
            [t.get("id"), t.get("name"), t.get("role"), "Yes" if t.get("previewable") else "No"]
            for t in themes
        ],
    )
    return f"## Themes\n\n{table}"


def format_generic_table(items: list[Any]) -> str:
    """Table of the first item's leading keys; missing values show as ``-``."""
    if not items:
        return EMPTY_TABLE_MARKER

    first = items[0] if isinstance(items[0], dict) else {}
    keys = list(first)[:GENERIC_TABLE_MAX_COLUMNS]
    rows = []
    for item in items:
        record = item if isinstance(item, dict) else {}
        rows.append([record.get(key, "-") for key in keys])
    return _table(keys, rows)


TABLE_RENDERERS: dict[str, Callable[[list[Any]], str]] = {
    "products": format_products_table,
    "orders": format_orders_table,
    "customers": format_customers_table,
    "draftOrders": format_draft_orders_table,
    "fulfillments": format_fulfillments_table,
    "locations": format_locations_table,
    "webhooks": format_webhooks_table,
    "priceRules": format_price_rules_table,
}


# -----------------------------------------------------------------------------
# Single entities
# -----------------------------------------------------------------------------


def format_object_as_markdown(data: dict[str, Any], entity_type: str) -> str:
    lines = [f"## {_capitalize(re.sub(r's$', '', entity_type))}", ""]

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            lines.append(f"**{format_key(key)}:**")
            lines.append("```json")
            lines.append(to_json(value))
            lines.append("```")
        else:
            lines.append(f"**{format_key(key)}:** {_display(value)}")

    return "\n".join(lines)


def format_key(key: str) -> str:
    """``totalPrice`` -> ``Total Price``."""
    spaced = re.sub(r"([A-Z])", r" \1", key)
    return _capitalize(spaced).strip()


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _display(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)
