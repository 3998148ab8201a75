"""
Storefront state store.

Holds the current AppState, runs every dispatched action through the pure
reducer and then applies the requested storage effects in the same call.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from yapee.storefront import actions as a
from yapee.storefront import effects as fx
from yapee.storefront.persistence import CartStorage
from yapee.storefront.reducer import reduce
from yapee.storefront.state import AppState, initial_state

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]


class Store:
    def __init__(self, storage, state: Optional[AppState] = None) -> None:
        self.persistence = CartStorage(storage)
        if state is None:
            user, cart = self.persistence.load_initial()
            state = initial_state(user=user, cart=cart)
        self._state = state
        self._listeners: List[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: a.Action) -> AppState:
        """Apply one action: pure transition first, storage effects after."""
        transition = reduce(self._state, action)
        self._state = transition.state
        for effect in transition.effects:
            follow_up = self._apply(effect)
            if follow_up is not None:
                self._state = reduce(self._state, follow_up).state

        logger.debug("Dispatched %s", type(action).__name__)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after every dispatch; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _apply(self, effect: fx.Effect) -> Optional[a.Action]:
        if isinstance(effect, fx.SaveCart):
            self.persistence.save_cart(effect.cart, effect.user_id)
        elif isinstance(effect, fx.SaveUser):
            self.persistence.save_user(effect.user)
        elif isinstance(effect, fx.DeleteUser):
            self.persistence.delete_user()
        elif isinstance(effect, fx.MigrateGlobalCart):
            self.persistence.migrate_global_cart(effect.user_id)
        elif isinstance(effect, fx.ReloadCart):
            return a.CartLoaded(self.persistence.load_cart(effect.user_id))
        return None
