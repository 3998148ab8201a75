from .auth import LoginRequest, Role, User
from .catalogue import Category, Product, ProductFilter

__all__ = [
    "Category",
    "LoginRequest",
    "Product",
    "ProductFilter",
    "Role",
    "User",
]
