"""
Lightweight in-memory key-value storage for local development and tests.

This implements the browser-style storage interface used by the storefront
`Store` (string keys, string values) so the client can run without a real
Redis instance.
"""

from __future__ import annotations

from typing import Dict, List, Optional


class LocalStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        # key -> serialized value
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    def ping(self) -> bool:
        """
        Health checks call this; always True so the API reports the cache as
        "connected" in local/dev mode.
        """
        return True
