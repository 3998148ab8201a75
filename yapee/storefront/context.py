"""
Store provider scope.

Code that reads the store through ``use_store()`` must run inside
``provide_store(store)``; anything else is a programming error and fails
immediately instead of falling back to a default store.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from yapee.storefront.store import Store

_current_store: ContextVar[Optional[Store]] = ContextVar("yapee_store", default=None)


class StoreContextError(RuntimeError):
    pass


@contextmanager
def provide_store(store: Store) -> Iterator[Store]:
    token = _current_store.set(store)
    try:
        yield store
    finally:
        _current_store.reset(token)


def use_store() -> Store:
    store = _current_store.get()
    if store is None:
        raise StoreContextError("use_store must be called within provide_store")
    return store
