"""
Shopify Admin REST Client

All HTTP communication with the Shopify Admin REST API goes through here.

The client:
1. Builds URLs against the tenant's shop and API version
2. Converts request bodies and query keys to snake_case
3. Maps error statuses onto the typed failure taxonomy
4. Converts response bodies to camelCase

One client is created per tenant (per incoming request on the HTTP
transport), so credentials never leak between shops.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any
from urllib.parse import urlencode

import httpx

from .casing import to_camel_case, to_snake_case
from .config import ACCESS_TOKEN_HEADER, DEFAULT_RETRY_AFTER_SECONDS, HTTP_TIMEOUT_SECONDS
from .credentials import TenantCredentials
from .errors import ApiError, AuthenticationError, RateLimitError, TransportFailure
from .pagination import PaginatedResponse, create_paginated_response, parse_link_header

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """HTTP methods used against the Admin API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class _NoContent:
    """Marker for a 204 response, distinct from an empty JSON object."""

    _instance: _NoContent | None = None

    def __new__(cls) -> _NoContent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_CONTENT"


NO_CONTENT = _NoContent()


def _render_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_render_query_value(item) for item in value)
    return str(value)


def _error_message(response: httpx.Response) -> str:
    """Pull Shopify's ``errors`` field out of an error body, if there is one."""
    default = f"Shopify API error: {response.status_code}"
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return default

    errors = payload.get("errors") if isinstance(payload, dict) else None
    if not errors:
        return default
    if isinstance(errors, str):
        return errors
    return json.dumps(errors)


def _unwrap(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, dict) else None


def _retry_after(response: httpx.Response) -> int:
    header = response.headers.get("Retry-After")
    if header is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        return int(float(header))
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS


class ShopifyClient:
    """
    Async client for one Shopify store.

    Use as an async context manager, or call ``close()`` when done.
    """

    def __init__(
        self,
        credentials: TenantCredentials,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.credentials = credentials
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return (
            f"https://{self.credentials.shop_domain}"
            f"/admin/api/{self.credentials.api_version}"
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    ACCESS_TOKEN_HEADER: self.credentials.access_token,
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Clean up HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> ShopifyClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Request plumbing
    # -------------------------------------------------------------------------

    @staticmethod
    def build_query(params: dict[str, Any] | None) -> str:
        """
        Encode camelCase params as a Shopify query string.

        Keys become snake_case, ``None`` values are dropped, lists are
        comma-joined and booleans are rendered ``true``/``false``.
        """
        if not params:
            return ""
        pairs = [
            (key, _render_query_value(value))
            for key, value in to_snake_case(params).items()
            if value is not None
        ]
        return urlencode(pairs, safe=",")

    async def request(
        self,
        path: str,
        method: HttpMethod = HttpMethod.GET,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send one request and return the camelCase response body.

        Returns ``NO_CONTENT`` for 204 responses.

        Raises:
            RateLimitError: 429.
            AuthenticationError: 401 or 403.
            ApiError: 404 and any other non-success status.
            TransportFailure: The request never got a response.
        """
        data, _ = await self._send(path, method, body, params)
        return data

    async def _send(
        self,
        path: str,
        method: HttpMethod,
        body: dict[str, Any] | None,
        params: dict[str, Any] | None,
    ) -> tuple[Any, httpx.Response]:
        query = self.build_query(params)
        url = f"{path}?{query}" if query else path
        payload = to_snake_case(body) if body is not None else None

        try:
            response = await self.client.request(method.value, url, json=payload)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method.value, path, e)
            raise TransportFailure(f"Request to Shopify failed: {e}", cause=e) from e

        logger.debug("%s %s -> %s", method.value, path, response.status_code)
        return self._parse_response(response), response

    def _parse_response(self, response: httpx.Response) -> Any:
        status = response.status_code

        if status == 429:
            raise RateLimitError("Rate limit exceeded", _retry_after(response))
        if status == 401:
            raise AuthenticationError("Invalid access token", 401)
        if status == 403:
            raise AuthenticationError("Access denied. Check your access scopes.", 403)
        if status == 404:
            raise ApiError("Resource not found", 404)
        if not response.is_success:
            raise ApiError(_error_message(response), status)

        if status == 204:
            return NO_CONTENT

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ApiError(
                f"Shopify returned a non-JSON response ({status})", status, cause=e
            ) from e
        return to_camel_case(data)

    # -------------------------------------------------------------------------
    # Resource helpers
    # -------------------------------------------------------------------------

    async def list_resource(
        self, path: str, key: str, params: dict[str, Any] | None = None
    ) -> PaginatedResponse:
        """GET a list endpoint and wrap the array found under ``key``."""
        data, response = await self._send(path, HttpMethod.GET, None, params)
        items = _unwrap(data, key) or []
        cursors = parse_link_header(response.headers.get("Link"))
        return create_paginated_response(
            items,
            (params or {}).get("limit"),
            next_cursor=cursors.get("next"),
        )

    async def list_all(
        self, path: str, key: str, params: dict[str, Any] | None = None
    ) -> list[Any]:
        """GET an endpoint that returns its whole collection as a flat array."""
        data = await self.request(path, params=params)
        return _unwrap(data, key) or []

    async def get_resource(
        self, path: str, key: str, params: dict[str, Any] | None = None
    ) -> Any:
        data = await self.request(path, params=params)
        return _unwrap(data, key)

    async def create_resource(
        self,
        path: str,
        key: str,
        payload: dict[str, Any],
        method: HttpMethod = HttpMethod.POST,
    ) -> Any:
        """Send ``{key: payload}`` and unwrap ``key`` from the reply."""
        data = await self.request(path, method=method, body={key: payload})
        return _unwrap(data, key)

    async def update_resource(self, path: str, key: str, payload: dict[str, Any]) -> Any:
        return await self.create_resource(path, key, payload, method=HttpMethod.PUT)

    async def delete_resource(self, path: str, params: dict[str, Any] | None = None) -> None:
        await self.request(path, method=HttpMethod.DELETE, params=params)

    async def count_resource(self, path: str, params: dict[str, Any] | None = None) -> int:
        data = await self.request(path, params=params)
        return data["count"]
