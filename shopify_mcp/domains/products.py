"""
Products Domain

Products, their variants, and their images.
https://shopify.dev/docs/api/admin-rest/latest/resources/product

This domain provides:
- Products CRUD operations and counts
- Variant CRUD under a product
- Product image CRUD under a product
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ..client import ShopifyClient
from ..pagination import PaginatedResponse
from ..tools import (
    FormattedArguments,
    PageArguments,
    ToolArguments,
    ToolDefinition,
    counted,
    deleted,
    formatted,
    mutated,
)

ProductStatus = Literal["active", "archived", "draft"]
PublishedStatus = Literal["published", "unpublished", "any"]


# -----------------------------------------------------------------------------
# Operations
# -----------------------------------------------------------------------------


async def list_products(
    client: ShopifyClient, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource("/products.json", "products", params)


async def get_product(client: ShopifyClient, product_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/products/{product_id}.json", "product")


async def create_product(client: ShopifyClient, data: dict[str, Any]) -> dict[str, Any]:
    return await client.create_resource("/products.json", "product", data)


async def update_product(
    client: ShopifyClient, product_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(f"/products/{product_id}.json", "product", data)


async def delete_product(client: ShopifyClient, product_id: int) -> None:
    await client.delete_resource(f"/products/{product_id}.json")


async def count_products(client: ShopifyClient, params: dict[str, Any] | None = None) -> int:
    return await client.count_resource("/products/count.json", params)


async def list_variants(
    client: ShopifyClient, product_id: int, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource(
        f"/products/{product_id}/variants.json", "variants", params
    )


async def get_variant(client: ShopifyClient, variant_id: int) -> dict[str, Any]:
    return await client.get_resource(f"/variants/{variant_id}.json", "variant")


async def create_variant(
    client: ShopifyClient, product_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource(
        f"/products/{product_id}/variants.json", "variant", data
    )


async def update_variant(
    client: ShopifyClient, variant_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(f"/variants/{variant_id}.json", "variant", data)


async def delete_variant(client: ShopifyClient, product_id: int, variant_id: int) -> None:
    await client.delete_resource(f"/products/{product_id}/variants/{variant_id}.json")


async def list_product_images(
    client: ShopifyClient, product_id: int, params: dict[str, Any] | None = None
) -> PaginatedResponse:
    return await client.list_resource(f"/products/{product_id}/images.json", "images", params)


async def get_product_image(
    client: ShopifyClient, product_id: int, image_id: int
) -> dict[str, Any]:
    return await client.get_resource(f"/products/{product_id}/images/{image_id}.json", "image")


async def create_product_image(
    client: ShopifyClient, product_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.create_resource(f"/products/{product_id}/images.json", "image", data)


async def update_product_image(
    client: ShopifyClient, product_id: int, image_id: int, data: dict[str, Any]
) -> dict[str, Any]:
    return await client.update_resource(
        f"/products/{product_id}/images/{image_id}.json", "image", data
    )


async def delete_product_image(client: ShopifyClient, product_id: int, image_id: int) -> None:
    await client.delete_resource(f"/products/{product_id}/images/{image_id}.json")


# -----------------------------------------------------------------------------
# Arguments
# -----------------------------------------------------------------------------


class ProductFilters(ToolArguments):
    vendor: str | None = Field(default=None, description="Filter by vendor")
    product_type: str | None = Field(default=None, description="Filter by product type")
    collection_id: str | None = Field(default=None, description="Filter by collection ID")
    status: ProductStatus | None = Field(default=None, description="Filter by status")


class ListProductsArgs(PageArguments):
    since_id: str | None = Field(default=None, description="Return products after this ID")
    title: str | None = Field(default=None, description="Filter by title")
    vendor: str | None = Field(default=None, description="Filter by vendor")
    handle: str | None = Field(default=None, description="Filter by handle")
    product_type: str | None = Field(default=None, description="Filter by product type")
    collection_id: str | None = Field(default=None, description="Filter by collection ID")
    status: ProductStatus | None = Field(default=None, description="Filter by status")
    published_status: PublishedStatus | None = Field(
        default=None, description="Filter by published status"
    )


class ProductIdArgs(FormattedArguments):
    product_id: int = Field(description="Product ID")


class ProductPageArgs(PageArguments):
    product_id: int = Field(description="Product ID")


class NewVariant(ToolArguments):
    title: str | None = None
    price: str | None = None
    sku: str | None = None
    inventory_quantity: int | None = None
    option1: str | None = None
    option2: str | None = None
    option3: str | None = None


class ProductOption(ToolArguments):
    name: str
    values: list[str]


class NewImage(ToolArguments):
    src: str
    alt: str | None = None


class CreateProductArgs(ToolArguments):
    title: str = Field(description="Product title (required)")
    body_html: str | None = Field(default=None, description="Product description in HTML")
    vendor: str | None = None
    product_type: str | None = None
    tags: str | None = Field(default=None, description="Comma-separated tags")
    status: ProductStatus | None = None
    variants: list[NewVariant] | None = None
    options: list[ProductOption] | None = None
    images: list[NewImage] | None = None


class UpdateProductArgs(ToolArguments):
    product_id: int = Field(description="Product ID to update")
    title: str | None = None
    body_html: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    tags: str | None = None
    status: ProductStatus | None = None


class DeleteProductArgs(ToolArguments):
    product_id: int = Field(description="Product ID to delete")


class VariantIdArgs(FormattedArguments):
    variant_id: int = Field(description="Variant ID")


class CreateVariantArgs(ToolArguments):
    product_id: int = Field(description="Product ID")
    price: str | None = None
    sku: str | None = None
    option1: str | None = None
    option2: str | None = None
    option3: str | None = None
    barcode: str | None = None
    weight: float | None = None
    weight_unit: Literal["g", "kg", "lb", "oz"] | None = None
    inventory_quantity: int | None = None


class UpdateVariantArgs(ToolArguments):
    variant_id: int = Field(description="Variant ID")
    price: str | None = None
    sku: str | None = None
    option1: str | None = None
    option2: str | None = None
    option3: str | None = None
    barcode: str | None = None
    weight: float | None = None
    compare_at_price: str | None = None


class DeleteVariantArgs(ToolArguments):
    product_id: int
    variant_id: int


class CreateImageArgs(ToolArguments):
    product_id: int
    src: str | None = Field(default=None, description="Image URL")
    attachment: str | None = Field(default=None, description="Base64-encoded image data")
    alt: str | None = None
    position: int | None = None
    variant_ids: list[int] | None = Field(
        default=None, description="Variant IDs this image belongs to"
    )


class UpdateImageArgs(ToolArguments):
    product_id: int
    image_id: int
    alt: str | None = None
    position: int | None = None
    variant_ids: list[int] | None = None


class DeleteImageArgs(ToolArguments):
    product_id: int
    image_id: int


# -----------------------------------------------------------------------------
# Tools
# -----------------------------------------------------------------------------


PRODUCT_TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="shopify_list_products",
        description=(
            "List products from the Shopify store with pagination and filters "
            "(title, vendor, handle, product type, collection, status)."
        ),
        arguments=ListProductsArgs,
        run=lambda client, args: list_products(client, args.payload()),
        render=formatted("products"),
    ),
    ToolDefinition(
        name="shopify_get_product",
        description="Get a single product by ID, with all variants and images.",
        arguments=ProductIdArgs,
        run=lambda client, args: get_product(client, args.product_id),
        render=formatted("product"),
    ),
    ToolDefinition(
        name="shopify_create_product",
        description=(
            "Create a new product. Title is required; variants, options and "
            "images may be supplied inline."
        ),
        arguments=CreateProductArgs,
        run=lambda client, args: create_product(client, args.payload()),
        render=mutated("Product created", "product"),
    ),
    ToolDefinition(
        name="shopify_update_product",
        description="Update an existing product's title, description, vendor, type, tags or status.",
        arguments=UpdateProductArgs,
        run=lambda client, args: update_product(
            client, args.product_id, args.payload("product_id")
        ),
        render=mutated("Product updated", "product"),
    ),
    ToolDefinition(
        name="shopify_delete_product",
        description="Delete a product from the store.",
        arguments=DeleteProductArgs,
        run=lambda client, args: delete_product(client, args.product_id),
        render=deleted("Product {product_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_get_product_count",
        description="Get the count of products matching filters.",
        arguments=ProductFilters,
        run=lambda client, args: count_products(client, args.payload()),
        render=counted,
    ),
    ToolDefinition(
        name="shopify_list_product_variants",
        description="List variants of a product.",
        arguments=ProductPageArgs,
        run=lambda client, args: list_variants(
            client, args.product_id, args.payload("product_id")
        ),
        render=formatted("variants"),
    ),
    ToolDefinition(
        name="shopify_get_variant",
        description="Get a single product variant by ID.",
        arguments=VariantIdArgs,
        run=lambda client, args: get_variant(client, args.variant_id),
        render=formatted("variant"),
    ),
    ToolDefinition(
        name="shopify_create_variant",
        description="Create a new variant for a product.",
        arguments=CreateVariantArgs,
        run=lambda client, args: create_variant(
            client, args.product_id, args.payload("product_id")
        ),
        render=mutated("Variant created", "variant"),
    ),
    ToolDefinition(
        name="shopify_update_variant",
        description="Update a product variant's price, SKU, options, barcode or weight.",
        arguments=UpdateVariantArgs,
        run=lambda client, args: update_variant(
            client, args.variant_id, args.payload("variant_id")
        ),
        render=mutated("Variant updated", "variant"),
    ),
    ToolDefinition(
        name="shopify_delete_variant",
        description="Delete a product variant.",
        arguments=DeleteVariantArgs,
        run=lambda client, args: delete_variant(client, args.product_id, args.variant_id),
        render=deleted("Variant {variant_id} deleted"),
    ),
    ToolDefinition(
        name="shopify_list_product_images",
        description="List images of a product.",
        arguments=ProductPageArgs,
        run=lambda client, args: list_product_images(
            client, args.product_id, args.payload("product_id")
        ),
        render=formatted("images"),
    ),
    ToolDefinition(
        name="shopify_create_product_image",
        description="Add an image to a product, from a URL (src) or base64 data (attachment).",
        arguments=CreateImageArgs,
        run=lambda client, args: create_product_image(
            client, args.product_id, args.payload("product_id")
        ),
        render=mutated("Image created", "image"),
    ),
    ToolDefinition(
        name="shopify_update_product_image",
        description="Update a product image's alt text, position or variant assignment.",
        arguments=UpdateImageArgs,
        run=lambda client, args: update_product_image(
            client, args.product_id, args.image_id, args.payload("product_id", "image_id")
        ),
        render=mutated("Image updated", "image"),
    ),
    ToolDefinition(
        name="shopify_delete_product_image",
        description="Delete a product image.",
        arguments=DeleteImageArgs,
        run=lambda client, args: delete_product_image(client, args.product_id, args.image_id),
        render=deleted("Image {image_id} deleted"),
    ),
]
