"""
Storefront reducer: (state, action) -> (next state, storage effects).

``reduce`` is pure. It never reads or writes storage and never mutates the
state it is given; cart and user changes are reported as effects for the
Store to apply.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Tuple

from yapee.storefront import actions as a
from yapee.storefront import effects as fx
from yapee.storefront.state import AppState, Cart, CartItem, CurrentPage


@dataclass(frozen=True)
class Transition:
    state: AppState
    effects: Tuple[fx.Effect, ...] = ()


def clamp_quantity(value: Any) -> int:
    """Floor to a non-negative int; anything that is not a finite number is 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return max(0, math.floor(value))


def _cart(state: AppState) -> Cart:
    return tuple(state.cart) if isinstance(state.cart, (tuple, list)) else ()


def _with_cart(state: AppState, cart: Cart) -> Transition:
    return Transition(replace(state, cart=cart), (fx.SaveCart(cart, state.user_id),))


def add_to_cart(cart: Cart, product) -> Cart:
    if any(item.product.id == product.id for item in cart):
        return tuple(
            item.model_copy(update={"quantity": item.quantity + 1}) if item.product.id == product.id else item
            for item in cart
        )
    return cart + (CartItem(product=product, quantity=1),)


def remove_from_cart(cart: Cart, product_id: str) -> Cart:
    return tuple(item for item in cart if item.product.id != product_id)


def update_quantity(cart: Cart, product_id: str, quantity: Any) -> Cart:
    next_qty = clamp_quantity(quantity)
    if next_qty == 0:
        return remove_from_cart(cart, product_id)
    return tuple(
        item.model_copy(update={"quantity": next_qty}) if item.product.id == product_id else item
        for item in cart
    )


def reduce(state: AppState, action: a.Action) -> Transition:
    if isinstance(action, a.AddToCart):
        return _with_cart(state, add_to_cart(_cart(state), action.product))

    if isinstance(action, a.RemoveFromCart):
        return _with_cart(state, remove_from_cart(_cart(state), action.product_id))

    if isinstance(action, a.UpdateCartQuantity):
        return _with_cart(state, update_quantity(_cart(state), action.product_id, action.quantity))

    if isinstance(action, a.ClearCart):
        return _with_cart(state, ())

    if isinstance(action, a.SetUser):
        if action.user is not None:
            # Login: the global cart moves to the user slot; logout never moves it back.
            return Transition(
                replace(state, user=action.user),
                (
                    fx.SaveUser(action.user),
                    fx.MigrateGlobalCart(action.user.id),
                    fx.ReloadCart(action.user.id),
                ),
            )
        return Transition(replace(state, user=None), (fx.DeleteUser(), fx.ReloadCart(None)))

    if isinstance(action, a.CartLoaded):
        return Transition(replace(state, cart=tuple(action.cart)))

    if isinstance(action, a.SetSearchQuery):
        return Transition(replace(state, search_query=action.query))

    if isinstance(action, a.SetSelectedCategory):
        return Transition(replace(state, selected_category=action.category))

    if isinstance(action, a.ToggleAdminMode):
        return Transition(replace(state, is_admin_mode=not state.is_admin_mode))

    if isinstance(action, a.SetProducts):
        return Transition(replace(state, products=tuple(action.products)))

    if isinstance(action, a.SetCategories):
        return Transition(replace(state, categories=tuple(action.categories)))

    if isinstance(action, a.SetLoading):
        return Transition(replace(state, loading=bool(action.loading)))

    if isinstance(action, a.SetCurrentPage):
        return Transition(replace(state, current_page=CurrentPage(action.page)))

    return Transition(state)
