"""
Entity Shapes

Shopify records are passed around as plain camelCase dicts. These TypedDicts
document the fields the Markdown renderers read; Shopify sends many more.
"""

from __future__ import annotations

from typing import Any, Literal, TypedDict

ResponseFormat = Literal["json", "markdown"]


class CustomerRef(TypedDict, total=False):
    id: int
    email: str
    firstName: str
    lastName: str


class Product(TypedDict, total=False):
    id: int
    title: str
    vendor: str
    productType: str
    status: str
    variants: list[dict[str, Any]]
    images: list[dict[str, Any]]


class Order(TypedDict, total=False):
    id: int
    name: str
    orderNumber: int
    customer: CustomerRef
    currency: str
    totalPrice: str
    financialStatus: str
    fulfillmentStatus: str
    createdAt: str
    lineItems: list[dict[str, Any]]


class Customer(TypedDict, total=False):
    id: int
    email: str
    firstName: str
    lastName: str
    ordersCount: int
    totalSpent: str


class DraftOrder(TypedDict, total=False):
    id: int
    name: str
    customer: CustomerRef
    totalPrice: str
    status: str
    createdAt: str


class Fulfillment(TypedDict, total=False):
    id: int
    orderId: int
    status: str
    trackingNumber: str
    createdAt: str


class Location(TypedDict, total=False):
    id: int
    name: str
    city: str
    countryCode: str
    active: bool


class Webhook(TypedDict, total=False):
    id: int
    topic: str
    address: str
    format: str


class PriceRule(TypedDict, total=False):
    id: int
    title: str
    targetType: str
    valueType: str
    value: str
    startsAt: str
    endsAt: str


class Theme(TypedDict, total=False):
    id: int
    name: str
    role: str
    previewable: bool
