"""
Actions consumed by the storefront reducer.

Every state change goes through one of these frozen records. ``Action`` is the
closed union of all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from yapee.integrations.contracts.auth import User
from yapee.integrations.contracts.catalogue import Category, Product
from yapee.storefront.state import CartItem, CurrentPage


@dataclass(frozen=True)
class AddToCart:
    product: Product


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: str


@dataclass(frozen=True)
class UpdateCartQuantity:
    product_id: str
    # Clamped by the reducer; anything that is not a finite number counts as 0.
    quantity: Any


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class SetUser:
    user: Optional[User]


@dataclass(frozen=True)
class SetSearchQuery:
    query: str


@dataclass(frozen=True)
class SetSelectedCategory:
    category: str


@dataclass(frozen=True)
class ToggleAdminMode:
    pass


@dataclass(frozen=True)
class SetProducts:
    products: Sequence[Product]


@dataclass(frozen=True)
class SetCategories:
    categories: Sequence[Category]


@dataclass(frozen=True)
class SetLoading:
    loading: bool


@dataclass(frozen=True)
class SetCurrentPage:
    page: CurrentPage


@dataclass(frozen=True)
class CartLoaded:
    """Replaces the cart with one read back from storage after a login/logout."""

    cart: Sequence[CartItem]


Action = Union[
    AddToCart,
    RemoveFromCart,
    UpdateCartQuantity,
    ClearCart,
    SetUser,
    SetSearchQuery,
    SetSelectedCategory,
    ToggleAdminMode,
    SetProducts,
    SetCategories,
    SetLoading,
    SetCurrentPage,
    CartLoaded,
]
