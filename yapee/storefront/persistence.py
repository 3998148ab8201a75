"""
Cart and user persistence on top of a key-value storage.

Storage layout (string keys, JSON values):
- ``yapee_user``            serialized User, or absent for an anonymous session
- ``yapee_cart``            global (anonymous) cart
- ``yapee_cart_{user_id}``  cart owned by one user

Reads never raise: a value that does not decode falls back to an empty cart
or an absent user and a warning is logged.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from yapee.integrations.contracts.auth import User
from yapee.storefront.state import Cart, CartItem

logger = logging.getLogger(__name__)

USER_KEY = "yapee_user"
GLOBAL_CART_KEY = "yapee_cart"


def cart_key(user_id: Optional[str] = None) -> str:
    return f"{GLOBAL_CART_KEY}_{user_id}" if user_id else GLOBAL_CART_KEY


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def decode_cart_entries(entries: Any) -> Cart:
    """
    Validate already-parsed cart data.

    Anything other than a list decodes to an empty cart. Entries are kept only
    when they look like ``{"product": {"id": str, ...}, "quantity": number}``
    and validate as a CartItem; fractional quantities are floored and entries
    left with a quantity below one are dropped, as are repeated product ids.
    """
    if not isinstance(entries, list):
        return ()

    items: List[CartItem] = []
    seen = set()
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        product = entry.get("product")
        quantity = entry.get("quantity")
        if not isinstance(product, dict) or not isinstance(product.get("id"), str):
            continue
        if not _is_number(quantity) or not math.isfinite(quantity):
            continue
        quantity = math.floor(quantity)
        if quantity < 1 or product["id"] in seen:
            continue
        try:
            item = CartItem.model_validate({"product": product, "quantity": quantity})
        except ValidationError as e:
            logger.warning("Dropping invalid cart entry for product %s: %s", product.get("id"), e)
            continue
        seen.add(item.product.id)
        items.append(item)
    return tuple(items)


def decode_cart(raw: Optional[str]) -> Cart:
    if not raw:
        return ()
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning("Error parsing cart from storage: %s", e)
        return ()
    return decode_cart_entries(parsed)


def encode_cart(cart: Sequence[CartItem]) -> str:
    return json.dumps([item.model_dump(mode="json", by_alias=True) for item in cart], ensure_ascii=False)


def decode_user(raw: Optional[str]) -> Optional[User]:
    if not raw:
        return None
    try:
        return User.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Error parsing user from storage: %s", e)
        return None


def encode_user(user: User) -> str:
    return user.model_dump_json(by_alias=True)


class CartStorage:
    """Reads and writes carts and the session user through an injected storage."""

    def __init__(self, storage) -> None:
        self.storage = storage

    # --- User ----------------------------------------------------------------

    def load_user(self) -> Optional[User]:
        return decode_user(self.storage.get_item(USER_KEY))

    def save_user(self, user: User) -> None:
        self.storage.set_item(USER_KEY, encode_user(user))

    def delete_user(self) -> None:
        self.storage.remove_item(USER_KEY)

    # --- Carts ---------------------------------------------------------------

    def load_global_cart(self) -> Cart:
        return decode_cart(self.storage.get_item(GLOBAL_CART_KEY))

    def load_cart(self, user_id: Optional[str] = None) -> Cart:
        """User-scoped cart when one is stored for ``user_id``, else the global cart."""
        if user_id:
            raw = self.storage.get_item(cart_key(user_id))
            if raw:
                try:
                    parsed = json.loads(raw)
                except (TypeError, ValueError) as e:
                    logger.warning("Error parsing cart for user %s from storage: %s", user_id, e)
                else:
                    if isinstance(parsed, list):
                        return decode_cart_entries(parsed)
        return self.load_global_cart()

    def save_cart(self, cart: Sequence[CartItem], user_id: Optional[str] = None) -> None:
        self.storage.set_item(cart_key(user_id), encode_cart(cart))

    def migrate_global_cart(self, user_id: str) -> bool:
        """
        Move a non-empty global cart into the user's slot verbatim and delete the
        global slot. Returns True when a migration happened.
        """
        global_cart = self.load_global_cart()
        if not global_cart:
            return False
        self.save_cart(global_cart, user_id)
        self.storage.remove_item(GLOBAL_CART_KEY)
        logger.info("Migrated %d cart item(s) to user %s", len(global_cart), user_id)
        return True

    def load_initial(self):
        """(user, cart) for a fresh session: the stored user, then that user's cart."""
        user = self.load_user()
        return user, self.load_cart(user.id if user else None)
