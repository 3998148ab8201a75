#!/usr/bin/env python3
"""
Walk through the anonymous cart -> login -> logout lifecycle and print the
cart and storage after each stage.

Runs fully in-process: the API is called through httpx.ASGITransport and the
client storage is the in-memory stub.

Usage (from repo root):
  python scripts/run_storefront_demo.py
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx

from yapee.api.main import app
from yapee.database.redis import LocalStorage
from yapee.integrations.clients.real_http.storefront import StorefrontClient
from yapee.storefront import actions as a
from yapee.storefront.app import StorefrontApp
from yapee.storefront.selectors import cart_item_count, cart_subtotal
from yapee.storefront.store import Store


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, shop: StorefrontApp, storage: LocalStorage):
    """Print a stage header, the active cart and the raw storage."""
    state = shop.state
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print(f"user: {state.user.username if state.user else '(anonymous)'}  view: {shop.view().value}")
    print(f"cart: {[(i.product.id, i.quantity) for i in state.cart]}")
    print(f"items: {cart_item_count(state.cart)}  subtotal: {cart_subtotal(state.cart)}")
    print("storage:")
    print(json.dumps({k: json.loads(storage.get_item(k)) for k in sorted(storage.keys())}, indent=2, ensure_ascii=False)[:2000])
    print()


async def main():
    setup_logging()
    storage = LocalStorage()
    client = StorefrontClient(base_url="http://storefront", transport=httpx.ASGITransport(app=app))
    shop = StorefrontApp(Store(storage), client)

    await shop.mount()
    print_stage("MOUNT: catalogue loaded", shop, storage)

    p1 = shop.state.products[0]
    shop.store.dispatch(a.AddToCart(p1))
    shop.store.dispatch(a.AddToCart(p1))
    print_stage("ANONYMOUS: added product twice", shop, storage)

    await shop.login("u1", "secret")
    print_stage("LOGIN: global cart migrated to user slot", shop, storage)

    shop.store.dispatch(a.UpdateCartQuantity(p1.id, 0))
    print_stage("UPDATE: quantity 0 removes the entry", shop, storage)

    shop.logout()
    print_stage("LOGOUT: global cart reloaded", shop, storage)


if __name__ == "__main__":
    asyncio.run(main())
