from datetime import datetime, timezone

from yapee.integrations.clients.mocks.auth import MockAuthClient
from yapee.integrations.clients.mocks.catalogue import MockCatalogueClient
from yapee.integrations.contracts.auth import Role
from yapee.integrations.contracts.catalogue import ProductFilter

FIXED = datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_admin_credentials_yield_admin():
    user = MockAuthClient(clock=lambda: FIXED).login("admin", "admin123")
    assert user.id == "admin1"
    assert user.role == Role.ADMIN
    assert user.is_admin
    assert user.created_at == FIXED


def test_other_credentials_yield_generic_user():
    user = MockAuthClient(clock=lambda: FIXED).login("carol", "whatever")
    assert user.id == "1"
    assert user.role == Role.USER
    assert user.username == "carol"
    assert user.email == "carol@yapee.vn"
    assert not user.is_admin


def test_catalogue_ignores_filters_and_never_changes():
    catalogue = MockCatalogueClient()
    first = catalogue.list_products()
    filtered = catalogue.list_products(ProductFilter(category="sach", search="x"))
    assert first == filtered
    first.clear()
    assert len(catalogue.list_products()) == 2


def test_catalogue_lookup():
    catalogue = MockCatalogueClient()
    assert catalogue.get_product("2").brand == "Samsung"
    assert catalogue.get_product("404") is None
    assert [c.slug for c in catalogue.list_categories()][:2] == ["dien-thoai", "dien-tu"]


def test_product_filter_query_params():
    params = ProductFilter(category="sach", search="", min_price=10).as_query_params()
    assert params == {"category": "sach", "minPrice": "10"}
