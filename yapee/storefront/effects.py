"""
Storage effects requested by the reducer.

The reducer never touches storage; it returns these commands and the Store
runs them against the injected storage right after the transition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from yapee.integrations.contracts.auth import User
from yapee.storefront.state import CartItem


@dataclass(frozen=True)
class SaveCart:
    cart: Sequence[CartItem]
    user_id: Optional[str] = None


@dataclass(frozen=True)
class SaveUser:
    user: User


@dataclass(frozen=True)
class DeleteUser:
    pass


@dataclass(frozen=True)
class MigrateGlobalCart:
    user_id: str


@dataclass(frozen=True)
class ReloadCart:
    """Read the cart for ``user_id`` (or the global cart) back into state."""

    user_id: Optional[str] = None


Effect = Union[SaveCart, SaveUser, DeleteUser, MigrateGlobalCart, ReloadCart]
