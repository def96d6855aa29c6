"""
Pagination envelope shared by every list operation.

Shopify list endpoints return a bare array under a plural key. The client
wraps that array in a PaginatedResponse so tools and formatters can treat
every list the same way.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field

from .config import DEFAULT_PAGE_LIMIT


_LINK_ENTRY = re.compile(r'<[^>]*page_info=([^>&]+)[^>]*>;\s*rel="(\w+)"')


class PaginatedResponse(BaseModel):
    """
    One page of results.

    ``hasMore`` is a heuristic: a full page suggests more results exist.
    ``nextCursor`` is only set when Shopify advertised a next page in the
    ``Link`` header.
    """

    items: list[Any] = Field(default_factory=list)
    count: int = 0
    hasMore: bool = False  # noqa: N815
    total: int | None = None
    nextCursor: str | None = None  # noqa: N815


def has_more_items(returned: int, limit: int | None) -> bool:
    """A page is assumed to continue when it came back exactly full."""
    return returned == (limit or DEFAULT_PAGE_LIMIT)


def create_paginated_response(
    items: list[Any],
    limit: int | None = None,
    *,
    next_cursor: str | None = None,
    total: int | None = None,
) -> PaginatedResponse:
    return PaginatedResponse(
        items=items,
        count=len(items),
        hasMore=has_more_items(len(items), limit),
        total=total,
        nextCursor=next_cursor,
    )


def wrap_items(items: list[Any]) -> PaginatedResponse:
    """Envelope for endpoints that return everything at once."""
    return PaginatedResponse(items=items, count=len(items), hasMore=False)


def parse_link_header(header: str | None) -> dict[str, str]:
    """
    Extract ``page_info`` cursors from a Shopify ``Link`` header.

    Returns a mapping of rel (``next``/``previous``) to cursor.
    """
    if not header:
        return {}
    return {rel: cursor for cursor, rel in _LINK_ENTRY.findall(header)}
