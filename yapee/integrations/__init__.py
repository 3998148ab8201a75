"""
Integrations layer.
This package contains the code on both sides of the storefront HTTP boundary:
- Mock clients that back the API service with fixed catalogue and auth data
- The HTTP client the storefront uses to reach the API service

Key rule:
- Storefront state code MUST NOT call the API directly.
- It goes through clients/real_http/storefront.py, driven by StorefrontApp.
"""

from .contracts.auth import LoginRequest, Role, User
from .contracts.catalogue import Category, Product, ProductFilter

__all__ = [
    "Category", "LoginRequest", "Product", "ProductFilter", "Role", "User",
]
