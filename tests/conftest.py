"""
Shared test fixtures for the Shopify MCP server tests.

Provides a mock Shopify transport, tenant credentials, and clients wired to
the mock so nothing reaches the network.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import pytest_asyncio

from shopify_mcp.adapter import ShopifyMcpAdapter
from shopify_mcp.client import ShopifyClient
from shopify_mcp.credentials import TenantCredentials


SHOP_DOMAIN = "test-shop.myshopify.com"
ACCESS_TOKEN = "shpat_test_token"
API_VERSION = "2024-01"
API_PREFIX = f"/admin/api/{API_VERSION}"


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


Reply = tuple[int, Any] | tuple[int, Any, dict[str, str]]


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined Shopify responses.

    Responses are keyed by ``(method, path)`` where ``path`` is relative to
    the Admin API prefix, e.g. ``("GET", "/products.json")``. A value is
    ``(status, body)`` or ``(status, body, headers)``; a ``None`` body sends
    an empty response.
    """

    def __init__(self, responses: dict[tuple[str, str], Reply] | None = None):
        self.responses = dict(responses or {})
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int, body: Any = None, headers=None) -> None:
        self.responses[(method, path)] = (status, body, headers or {})

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        path = request.url.path
        if path.startswith(API_PREFIX):
            path = path[len(API_PREFIX):]

        reply = self.responses.get((request.method, path))
        if reply is None:
            return httpx.Response(404, json={"errors": "Not Found"})

        status, body, *rest = reply
        headers = rest[0] if rest else {}
        if body is None:
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, json=body, headers=headers)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


MOCK_PRODUCT = {
    "id": 632910392,
    "title": "IPod Nano - 8GB",
    "vendor": "Apple",
    "product_type": "Cult Products",
    "status": "active",
    "variants": [
        {"id": 808950810, "title": "Pink", "price": "199.00", "inventory_quantity": 10},
    ],
}

MOCK_ORDER = {
    "id": 450789469,
    "name": "#1001",
    "email": "bob.norman@mail.example.com",
    "financial_status": "paid",
    "fulfillment_status": None,
    "total_price": "598.94",
    "currency": "USD",
    "customer": {"id": 207119551, "first_name": "Bob", "last_name": "Norman"},
    "line_items": [{"id": 466157049, "title": "IPod Nano - 8GB", "quantity": 1}],
}

MOCK_SHOP = {
    "id": 548380009,
    "name": "John Smith Test Store",
    "email": "j.smith@example.com",
    "domain": "shop.apple.com",
    "myshopify_domain": SHOP_DOMAIN,
    "plan_name": "enterprise",
}


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def credentials() -> TenantCredentials:
    return TenantCredentials(
        shop_domain=SHOP_DOMAIN,
        access_token=ACCESS_TOKEN,
        api_version=API_VERSION,
    )


@pytest.fixture
def mock_transport() -> MockTransport:
    """A transport with a few common responses."""
    return MockTransport({
        ("GET", "/shop.json"): (200, {"shop": MOCK_SHOP}),
        ("GET", "/products.json"): (200, {"products": [MOCK_PRODUCT]}),
        ("GET", f"/products/{MOCK_PRODUCT['id']}.json"): (200, {"product": MOCK_PRODUCT}),
        ("GET", f"/orders/{MOCK_ORDER['id']}.json"): (200, {"order": MOCK_ORDER}),
    })


@pytest_asyncio.fixture
async def client(credentials: TenantCredentials, mock_transport: MockTransport):
    """A ShopifyClient whose requests go to ``mock_transport``."""
    async with ShopifyClient(credentials, transport=mock_transport) as shopify:
        yield shopify


@pytest.fixture
def adapter() -> ShopifyMcpAdapter:
    return ShopifyMcpAdapter()
