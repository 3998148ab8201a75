"""Pytest fixtures for the storefront store and API tests."""

from datetime import datetime, timezone

import pytest

from yapee.database.redis import LocalStorage
from yapee.integrations.contracts.auth import Role, User
from yapee.integrations.contracts.catalogue import Product
from yapee.storefront.store import Store


def _make_product(product_id: str, price: int = 100, **extra) -> Product:
    return Product(id=product_id, name=f"Product {product_id}", price=price, **extra)


def _make_user(user_id: str = "u1", username: str = "alice", role: Role = Role.USER) -> User:
    return User(
        id=user_id,
        username=username,
        email=f"{username}@yapee.vn",
        name=username.title(),
        role=role,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_product():
    """Factory for catalogue products: `make_product("P1", price=100)`."""
    return _make_product


@pytest.fixture
def make_user():
    return _make_user


@pytest.fixture
def storage():
    """In-memory key-value storage stub."""
    return LocalStorage()


@pytest.fixture
def store(storage):
    return Store(storage)


@pytest.fixture
def p1():
    return _make_product("P1", price=100)


@pytest.fixture
def p2():
    return _make_product("P2", price=250)


@pytest.fixture
def user():
    return _make_user()
