"""
Storage selection: real Redis when REDIS_URL is set, else the in-memory stub.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from yapee.database import redis as memory_storage

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "yapee"


def create_local_storage(client_id: str = "default", namespace: Optional[str] = None, url: Optional[str] = None):
    """Return a key-value storage for one storefront client."""
    url = url or os.getenv("REDIS_URL")
    if url:
        from yapee.database.redis_real import LocalStorage as RedisLocalStorage

        logger.info("Using Redis storage for client %s", client_id)
        return RedisLocalStorage(url=url, namespace=namespace or DEFAULT_NAMESPACE, client_id=client_id)

    logger.debug("Using in-memory storage for client %s", client_id)
    return memory_storage.LocalStorage()
