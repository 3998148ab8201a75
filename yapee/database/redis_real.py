"""
Real Redis-backed storage when REDIS_URL is set. Implements the same
interface as yapee.database.redis (in-memory stub).

Each storefront client gets its own namespace so several clients can share
one Redis instance without seeing each other's carts.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import redis

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    Redis-backed key-value storage. Values are stored as plain strings.
    """

    def __init__(self, url: str, namespace: str = "yapee", client_id: str = "default") -> None:
        self._client = redis.from_url(url, decode_responses=True)
        self._prefix = f"{namespace}:{client_id}:"

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get_item(self, key: str) -> Optional[str]:
        return self._client.get(self._key(key))

    def set_item(self, key: str, value: str) -> None:
        self._client.set(self._key(key), str(value))

    def remove_item(self, key: str) -> None:
        self._client.delete(self._key(key))

    def keys(self) -> List[str]:
        return [k[len(self._prefix):] for k in self._client.scan_iter(match=f"{self._prefix}*")]

    def clear(self) -> None:
        keys = list(self._client.scan_iter(match=f"{self._prefix}*"))
        if keys:
            self._client.delete(*keys)

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis ping failed: %s", e)
            return False
