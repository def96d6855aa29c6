"""Nested argument shapes shared by several domains."""

from __future__ import annotations

from pydantic import Field

from ..tools import ToolArguments


class AddressInput(ToolArguments):
    first_name: str | None = None
    last_name: str | None = None
    address1: str | None = None
    city: str | None = None
    province: str | None = None
    country: str | None = None
    zip: str | None = None
    phone: str | None = None


class CustomerRefInput(ToolArguments):
    id: int | None = None
    email: str | None = None


class LineItemInput(ToolArguments):
    variant_id: int | None = Field(default=None, description="Variant ID")
    title: str | None = Field(default=None, description="Product title")
    quantity: int = Field(description="Quantity")
    price: str | None = Field(default=None, description="Price")
