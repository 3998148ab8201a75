"""
Storefront application state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from yapee.integrations.contracts.auth import User
from yapee.integrations.contracts.catalogue import Category, Product


class CurrentPage(str, Enum):
    HOME = "home"
    ORDERS = "orders"
    PROFILE = "profile"
    ADMIN = "admin"
    SEARCH = "search"
    WISHLIST = "wishlist"


class CartItem(BaseModel):
    """A product copy plus a quantity of at least one."""

    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(..., ge=1)


Cart = Tuple[CartItem, ...]


@dataclass(frozen=True)
class AppState:
    cart: Cart = ()
    user: Optional[User] = None
    search_query: str = ""
    selected_category: str = ""
    is_admin_mode: bool = False
    products: Tuple[Product, ...] = ()
    categories: Tuple[Category, ...] = ()
    loading: bool = True
    current_page: CurrentPage = CurrentPage.HOME

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user else None


def initial_state(user: Optional[User] = None, cart: Cart = ()) -> AppState:
    return AppState(cart=tuple(cart), user=user)
