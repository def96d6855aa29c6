"""
Key Casing

Shopify speaks snake_case on the wire; everything above the client works
with camelCase keys. These helpers convert between the two and walk nested
dicts and lists so whole payloads can be converted in one call.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

_SNAKE_SEGMENT = re.compile(r"_([a-z])")
_UPPER_LETTER = re.compile(r"[A-Z]")


def snake_to_camel(key: str) -> str:
    """Convert ``since_id`` to ``sinceId``. Only ``_`` + lowercase letter is folded."""
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1).upper(), key)


def camel_to_snake(key: str) -> str:
    """Convert ``sinceId`` to ``since_id``. Every uppercase letter gets a ``_`` prefix."""
    return _UPPER_LETTER.sub(lambda m: "_" + m.group(0).lower(), key)


def transform_keys(data: Any, transform: Callable[[str], str]) -> Any:
    """Rename every dict key in ``data`` recursively. Scalars pass through."""
    if isinstance(data, dict):
        return {transform(key): transform_keys(value, transform) for key, value in data.items()}
    if isinstance(data, list):
        return [transform_keys(item, transform) for item in data]
    return data


def to_camel_case(data: Any) -> Any:
    return transform_keys(data, snake_to_camel)


def to_snake_case(data: Any) -> Any:
    return transform_keys(data, camel_to_snake)
