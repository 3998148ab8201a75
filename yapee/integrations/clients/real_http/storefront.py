"""
Storefront HTTP Client.

Purpose:
- Talks to the mock API service on behalf of the storefront client
- Normalizes JSON payloads into the catalogue and auth contracts

Usage:
- Wired into yapee/storefront/app.py (StorefrontApp)

Implementation notes:
- Uses httpx for async requests
- Raises httpx.HTTPError on transport or status failures; callers decide how
  to degrade
- An explicit transport can be passed in (tests use httpx.ASGITransport to
  call the FastAPI app in-process)
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import httpx

from yapee.integrations.contracts.auth import User
from yapee.integrations.contracts.catalogue import Category, Product, ProductFilter

DEFAULT_BASE_URL = "http://localhost:3001"


class StorefrontClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("STOREFRONT_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout_seconds, transport=self._transport)

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        async with self._client() as client:
            response = await client.get(path, params=params)
            response.raise_for_status()
            return response.json()

    async def list_products(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Product]:
        params = ProductFilter(category=category or None, search=search or None).as_query_params()
        data = await self._get("/api/products", params=params or None)
        return [Product.model_validate(item) for item in data]

    async def list_categories(self) -> List[Category]:
        data = await self._get("/api/categories")
        return [Category.model_validate(item) for item in data]

    async def login(self, username: str, password: str) -> User:
        async with self._client() as client:
            response = await client.post("/api/auth/login", json={"username": username, "password": password})
            response.raise_for_status()
            return User.model_validate(response.json())

    async def health(self) -> Dict[str, Any]:
        return await self._get("/api/health")
