"""
Read-only helpers over AppState.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from yapee.storefront.state import AppState, CartItem, CurrentPage


class View(str, Enum):
    ADMIN = "admin"
    CHECKOUT = "checkout"
    ORDERS = "orders"
    PROFILE = "profile"
    WISHLIST = "wishlist"
    SEARCH = "search"
    HOME = "home"


_PAGE_VIEWS = {
    CurrentPage.ORDERS: View.ORDERS,
    CurrentPage.PROFILE: View.PROFILE,
    CurrentPage.WISHLIST: View.WISHLIST,
    CurrentPage.SEARCH: View.SEARCH,
}


def resolve_view(state: AppState, show_checkout: bool = False) -> View:
    """
    Screen to render for ``state``.

    Admin mode wins over everything, then an open checkout, then the current
    page. The admin page without admin mode falls through to home.
    """
    if state.is_admin_mode:
        return View.ADMIN
    if show_checkout:
        return View.CHECKOUT
    return _PAGE_VIEWS.get(state.current_page, View.HOME)


def cart_item_count(cart: Sequence[CartItem]) -> int:
    return sum(item.quantity for item in cart)


def cart_subtotal(cart: Sequence[CartItem]) -> int:
    """Sum of price * quantity in minor currency units."""
    return sum(item.product.price * item.quantity for item in cart)


def find_cart_item(cart: Sequence[CartItem], product_id: str):
    return next((item for item in cart if item.product.id == product_id), None)
