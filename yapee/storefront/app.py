"""
Storefront application shell.

Wires a Store to the API client: fetches the catalogue on mount and whenever
the category or search filter changes, feeds the results into the store as
replacement actions, and turns login/logout into SetUser actions.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Union

import httpx
from pydantic import ValidationError

from yapee.database.storage import create_local_storage
from yapee.integrations.clients.real_http.storefront import StorefrontClient
from yapee.integrations.contracts.auth import User
from yapee.storefront import actions as a
from yapee.storefront.selectors import View, resolve_view
from yapee.storefront.state import AppState, CurrentPage
from yapee.storefront.store import Store

logger = logging.getLogger(__name__)


class StorefrontApp:
    def __init__(self, store: Store, client: StorefrontClient) -> None:
        self.store = store
        self.client = client
        self.show_checkout = False
        self._products_in_flight = 0
        self._categories_in_flight = 0
        self._products_seq = 0

    @classmethod
    def from_env(cls, client_id: str = "default", base_url: Optional[str] = None) -> "StorefrontApp":
        return cls(Store(create_local_storage(client_id=client_id)), StorefrontClient(base_url=base_url))

    @property
    def state(self) -> AppState:
        return self.store.state

    def view(self) -> View:
        return resolve_view(self.store.state, show_checkout=self.show_checkout)

    # --- Catalogue -----------------------------------------------------------

    def _sync_loading(self) -> None:
        loading = self._products_in_flight > 0 or self._categories_in_flight > 0
        if self.store.state.loading != loading:
            self.store.dispatch(a.SetLoading(loading))

    async def fetch_products(self) -> None:
        state = self.store.state
        self._products_seq += 1
        seq = self._products_seq
        self._products_in_flight += 1
        self._sync_loading()
        try:
            products = await self.client.list_products(
                category=state.selected_category or None,
                search=state.search_query or None,
            )
        except (httpx.HTTPError, ValidationError) as e:
            logger.error("Failed to fetch products: %s", e)
            products = []
        finally:
            self._products_in_flight -= 1
        if seq == self._products_seq:
            self.store.dispatch(a.SetProducts(products))
        else:
            logger.debug("Discarding stale product results (request %d, latest %d)", seq, self._products_seq)
        self._sync_loading()

    async def fetch_categories(self) -> None:
        self._categories_in_flight += 1
        self._sync_loading()
        try:
            categories = await self.client.list_categories()
        except (httpx.HTTPError, ValidationError) as e:
            logger.error("Failed to fetch categories: %s", e)
            categories = []
        finally:
            self._categories_in_flight -= 1
        self.store.dispatch(a.SetCategories(categories))
        self._sync_loading()

    async def mount(self) -> AppState:
        await asyncio.gather(self.fetch_products(), self.fetch_categories())
        return self.store.state

    async def set_filter(self, category: Optional[str] = None, search: Optional[str] = None) -> AppState:
        if category is not None:
            self.store.dispatch(a.SetSelectedCategory(category))
        if search is not None:
            self.store.dispatch(a.SetSearchQuery(search))
        await self.fetch_products()
        return self.store.state

    # --- Session -------------------------------------------------------------

    async def login(self, username: str, password: str) -> User:
        try:
            user = await self.client.login(username, password)
        except httpx.HTTPError as e:
            logger.error("Login failed for %s: %s", username, e)
            raise
        self.store.dispatch(a.SetUser(user))
        return user

    def logout(self) -> AppState:
        return self.store.dispatch(a.SetUser(None))

    # --- Navigation ----------------------------------------------------------

    def navigate(self, page: Union[CurrentPage, str]) -> AppState:
        self.show_checkout = False
        return self.store.dispatch(a.SetCurrentPage(CurrentPage(page)))

    def open_checkout(self) -> None:
        self.show_checkout = True

    def close_checkout(self) -> None:
        self.show_checkout = False
