import pytest

from yapee.storefront.selectors import View, cart_item_count, cart_subtotal, find_cart_item, resolve_view
from yapee.storefront.state import AppState, CartItem, CurrentPage


def test_admin_mode_overrides_page_and_checkout():
    state = AppState(is_admin_mode=True, current_page=CurrentPage.ORDERS)
    assert resolve_view(state) == View.ADMIN
    assert resolve_view(state, show_checkout=True) == View.ADMIN


def test_checkout_overrides_page():
    assert resolve_view(AppState(current_page=CurrentPage.PROFILE), show_checkout=True) == View.CHECKOUT


@pytest.mark.parametrize(
    "page,view",
    [
        (CurrentPage.HOME, View.HOME),
        (CurrentPage.ORDERS, View.ORDERS),
        (CurrentPage.PROFILE, View.PROFILE),
        (CurrentPage.WISHLIST, View.WISHLIST),
        (CurrentPage.SEARCH, View.SEARCH),
        (CurrentPage.ADMIN, View.HOME),
    ],
)
def test_page_views(page, view):
    assert resolve_view(AppState(current_page=page)) == view


def test_cart_totals(make_product):
    cart = (
        CartItem(product=make_product("A", price=100), quantity=2),
        CartItem(product=make_product("B", price=34990000), quantity=1),
    )
    assert cart_item_count(cart) == 3
    assert cart_subtotal(cart) == 34990200
    assert cart_item_count(()) == 0
    assert cart_subtotal(()) == 0


def test_find_cart_item(p1):
    cart = (CartItem(product=p1, quantity=2),)
    assert find_cart_item(cart, "P1").quantity == 2
    assert find_cart_item(cart, "nope") is None
