"""
Local Catalogue Client (Mock).

Purpose:
- Acts as the product and category source for the mock API service.
- Returns fixed in-memory records; nothing is ever written.

Usage:
- Wired in yapee/api/main.py and served by yapee/api/endpoints/catalogue.py

Filters are accepted so the client has the same interface as a real
catalogue backend, but they do not narrow the mock results.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from yapee.integrations.contracts.catalogue import Category, Product, ProductFilter

logger = logging.getLogger(__name__)


MOCK_PRODUCTS: List[dict] = [
    {
        "id": "1",
        "name": "iPhone 15 Pro Max 256GB",
        "price": 34990000,
        "originalPrice": 36990000,
        "discount": 5,
        "image": "https://images.pexels.com/photos/788946/pexels-photo-788946.jpeg",
        "images": ["https://images.pexels.com/photos/788946/pexels-photo-788946.jpeg"],
        "description": "iPhone 15 Pro Max với chip A17 Pro, camera 48MP",
        "category": "dien-thoai",
        "brand": "Apple",
        "rating": 4.8,
        "reviewCount": 2847,
        "sold": 1250,
        "stock": 50,
        "tags": ["hot", "new"],
        "specifications": {
            "Màn hình": "6.7 inch Super Retina XDR",
            "Camera": "48MP + 12MP + 12MP",
            "Chip": "A17 Pro",
            "RAM": "8GB",
            "Bộ nhớ": "256GB",
        },
    },
    {
        "id": "2",
        "name": "Samsung Galaxy S24 Ultra 512GB",
        "price": 31990000,
        "originalPrice": 33990000,
        "discount": 6,
        "image": "https://images.pexels.com/photos/404280/pexels-photo-404280.jpeg",
        "images": ["https://images.pexels.com/photos/404280/pexels-photo-404280.jpeg"],
        "description": "Galaxy S24 Ultra với S Pen tích hợp",
        "category": "dien-thoai",
        "brand": "Samsung",
        "rating": 4.7,
        "reviewCount": 1893,
        "sold": 890,
        "stock": 35,
        "tags": ["hot"],
        "specifications": {
            "Màn hình": "6.8 inch Dynamic AMOLED 2X",
            "Camera": "200MP + 50MP + 12MP + 10MP",
            "Chip": "Snapdragon 8 Gen 3",
            "RAM": "12GB",
            "Bộ nhớ": "512GB",
        },
    },
]

MOCK_CATEGORIES: List[dict] = [
    {"id": "1", "name": "Điện Thoại - Máy Tính Bảng", "icon": "Smartphone", "slug": "dien-thoai"},
    {"id": "2", "name": "Điện Tử", "icon": "Laptop", "slug": "dien-tu"},
    {"id": "3", "name": "Thời Trang Nam", "icon": "ShirtIcon", "slug": "thoi-trang-nam"},
    {"id": "4", "name": "Thời Trang Nữ", "icon": "Shirt", "slug": "thoi-trang-nu"},
    {"id": "5", "name": "Mẹ & Bé", "icon": "Baby", "slug": "me-be"},
    {"id": "6", "name": "Nhà Cửa & Đời Sống", "icon": "Home", "slug": "nha-cua"},
    {"id": "7", "name": "Sách & Tiểu Thuyết", "icon": "Book", "slug": "sach"},
    {"id": "8", "name": "Thể Thao & Du Lịch", "icon": "Bike", "slug": "the-thao"},
]


class MockCatalogueClient:
    def __init__(self, products: Optional[List[dict]] = None, categories: Optional[List[dict]] = None) -> None:
        self._products = [Product.model_validate(p) for p in (products if products is not None else MOCK_PRODUCTS)]
        self._categories = [Category.model_validate(c) for c in (categories if categories is not None else MOCK_CATEGORIES)]

    def list_products(self, filters: Optional[ProductFilter] = None) -> List[Product]:
        if filters is not None:
            logger.info("Products request with filters: %s", filters.as_query_params())
        return list(self._products)

    def get_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def list_categories(self) -> List[Category]:
        return list(self._categories)


mock_catalogue_client = MockCatalogueClient()
