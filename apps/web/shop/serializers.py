"""
Pydantic schemas for shop API requests and responses.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from framing_schemas import CartItem


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


# =============================================================================
# Catalog
# =============================================================================


class ProductSchema(_ApiModel):
    id: int
    slug: str
    name: str
    description: str
    price: int
    images: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    materials: str
    in_stock: bool
    featured: bool
    collection_slug: str | None = None


class CollectionSchema(_ApiModel):
    id: int
    slug: str
    name: str
    description: str
    image_url: str
    featured: bool
    product_count: int = 0


class CollectionDetailResponse(_ApiModel):
    collection: CollectionSchema
    products: list[ProductSchema]


class CollectionListResponse(_ApiModel):
    collections: list[CollectionSchema]


class ProductListResponse(_ApiModel):
    products: list[ProductSchema]


# =============================================================================
# Cart
# =============================================================================


class AddCartItemRequest(_ApiModel):
    """Body of POST /api/cart/items/. Price always comes from the catalog."""

    product_id: str = Field(min_length=1)
    size: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1, le=99)


class UpdateQuantityRequest(_ApiModel):
    quantity: int = Field(le=99)


class CartResponse(_ApiModel):
    items: list[CartItem]
    is_open: bool
    item_count: int
    subtotal: int
    shipping: int
    total: int
    free_shipping_threshold: int
