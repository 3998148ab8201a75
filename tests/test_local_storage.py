import fnmatch

import redis

import yapee.database.redis_real as redis_real_mod
from yapee.database.redis import LocalStorage
from yapee.database.storage import create_local_storage
from yapee.storefront import actions as a
from yapee.storefront.persistence import cart_key
from yapee.storefront.store import Store


class DummyRedis:
    def __init__(self, fail_ping=False):
        self.data = {}
        self.fail_ping = fail_ping

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def delete(self, *keys):
        for key in keys:
            self.data.pop(key, None)

    def scan_iter(self, match="*"):
        return [k for k in list(self.data) if fnmatch.fnmatch(k, match)]

    def ping(self):
        if self.fail_ping:
            raise redis.ConnectionError("down")
        return True


def test_in_memory_storage_basics():
    s = LocalStorage({"a": "1"})
    assert s.get_item("a") == "1"
    assert s.get_item("missing") is None
    s.set_item("b", "2")
    s.remove_item("a")
    s.remove_item("never-there")
    assert s.keys() == ["b"]
    assert s.ping() is True
    s.clear()
    assert s.keys() == []


def test_redis_storage_namespaces_keys(monkeypatch):
    dummy = DummyRedis()
    monkeypatch.setattr(redis_real_mod.redis, "from_url", lambda url, decode_responses: dummy)

    alice = redis_real_mod.LocalStorage("redis://test", client_id="alice")
    bob = redis_real_mod.LocalStorage("redis://test", client_id="bob")
    alice.set_item("yapee_cart", "[]")
    bob.set_item("yapee_user", "{}")

    assert dummy.data == {"yapee:alice:yapee_cart": "[]", "yapee:bob:yapee_user": "{}"}
    assert alice.get_item("yapee_cart") == "[]"
    assert alice.get_item("yapee_user") is None
    assert alice.keys() == ["yapee_cart"]

    alice.remove_item("yapee_cart")
    assert alice.keys() == []
    bob.clear()
    assert dummy.data == {}


def test_redis_storage_ping(monkeypatch):
    monkeypatch.setattr(redis_real_mod.redis, "from_url", lambda url, decode_responses: DummyRedis(fail_ping=True))
    assert redis_real_mod.LocalStorage("redis://test").ping() is False


def test_store_runs_on_redis_storage(monkeypatch, p1, user):
    dummy = DummyRedis()
    monkeypatch.setattr(redis_real_mod.redis, "from_url", lambda url, decode_responses: dummy)
    storage = create_local_storage(client_id="c1", url="redis://test")
    assert isinstance(storage, redis_real_mod.LocalStorage)

    store = Store(storage)
    store.dispatch(a.AddToCart(p1))
    store.dispatch(a.SetUser(user))
    assert "yapee:c1:yapee_cart" not in dummy.data
    assert "yapee:c1:" + cart_key("u1") in dummy.data

    # a new session on the same storage picks up the user and their cart
    restored = Store(storage).state
    assert restored.user == user
    assert [i.product.id for i in restored.cart] == ["P1"]


def test_create_local_storage_without_redis_url(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)
    assert isinstance(create_local_storage(), LocalStorage)
