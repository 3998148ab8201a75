"""
Catalogue contracts.

Defines the shape of product and category records exchanged between the
mock API service and the storefront client:
- product_id, name, price (integer minor units), brand, category
- images, rating, stock and free-form specifications
- category tree entries used by navigation

These contracts must be used by both:
- clients/mocks/catalogue.py (fixed in-memory data served by the API)
- clients/real_http/storefront.py (HTTP client consumed by the storefront)

Field names on the wire are camelCase (``originalPrice``, ``reviewCount``);
Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalogue product. Immutable once fetched."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    price: int = Field(..., ge=0, description="Price in minor currency units")
    original_price: Optional[int] = Field(None, ge=0, alias="originalPrice")
    discount: Optional[int] = Field(None, ge=0, le=100, description="Discount percentage")
    image: str = ""
    images: List[str] = Field(default_factory=list)
    description: str = ""
    category: str = ""
    brand: str = ""
    rating: float = Field(0.0, ge=0, le=5)
    review_count: int = Field(0, ge=0, alias="reviewCount")
    sold: int = Field(0, ge=0)
    stock: int = Field(0, ge=0)
    tags: List[str] = Field(default_factory=list)
    specifications: Dict[str, str] = Field(default_factory=dict)


class Category(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    icon: str = ""
    slug: str
    parent_id: Optional[str] = Field(None, alias="parentId")
    children: Optional[List["Category"]] = None


class ProductFilter(BaseModel):
    """Query parameters accepted by the product listing."""

    model_config = ConfigDict(populate_by_name=True)

    category: Optional[str] = None
    search: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[int] = Field(None, ge=0, alias="minPrice")
    max_price: Optional[int] = Field(None, ge=0, alias="maxPrice")

    def as_query_params(self) -> Dict[str, str]:
        """Non-empty filters, keyed by their wire names."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {k: str(v) for k, v in data.items() if v != ""}
