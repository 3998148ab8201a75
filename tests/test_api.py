from fastapi.testclient import TestClient

from yapee.api.endpoints.auth import get_auth_client
from yapee.api.endpoints.catalogue import get_catalogue_client
from yapee.api.main import app

client = TestClient(app)


def test_list_products_returns_mock_products():
    response = client.get("/api/products")
    assert response.status_code == 200
    products = response.json()
    assert [p["id"] for p in products] == ["1", "2"]
    iphone = products[0]
    assert iphone["name"] == "iPhone 15 Pro Max 256GB"
    assert iphone["price"] == 34990000
    assert iphone["originalPrice"] == 36990000
    assert iphone["reviewCount"] == 2847
    assert iphone["specifications"]["Chip"] == "A17 Pro"


def test_product_filters_are_accepted_but_ignored():
    unfiltered = client.get("/api/products").json()
    response = client.get("/api/products", params={"category": "thoi-trang-nu", "search": "zzz", "minPrice": 5})
    assert response.status_code == 200
    assert response.json() == unfiltered


def test_list_categories():
    response = client.get("/api/categories")
    assert response.status_code == 200
    categories = response.json()
    assert len(categories) == 8
    assert categories[0] == {
        "id": "1",
        "name": "Điện Thoại - Máy Tính Bảng",
        "icon": "Smartphone",
        "slug": "dien-thoai",
        "parentId": None,
        "children": None,
    }


def test_admin_login():
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    user = response.json()
    assert user["id"] == "admin1"
    assert user["role"] == "admin"
    assert user["email"] == "admin@yapee.vn"
    assert user["name"] == "Admin Yapee"
    assert "createdAt" in user


def test_any_other_login_is_a_regular_user():
    for payload in ({"username": "admin", "password": "wrong"}, {"username": "bob", "password": ""}):
        user = client.post("/api/auth/login", json=payload).json()
        assert user["id"] == "1"
        assert user["role"] == "user"
        assert user["username"] == payload["username"]
        assert user["email"] == f"{payload['username']}@yapee.vn"


def test_login_requires_username():
    response = client.post("/api/auth/login", json={"password": "x"})
    assert response.status_code == 422


def test_health_endpoints():
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["version"] == "1.0.0"
    assert health["uptime"] >= 0
    assert "environment" in health and "timestamp" in health

    api_health = client.get("/api/health").json()
    assert api_health["status"] == "API healthy"
    assert api_health["cache"] == "connected"


def test_unknown_route_returns_json_404():
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found", "path": "/api/nope", "method": "GET"}


class BrokenCatalogue:
    def list_products(self, filters=None):
        raise RuntimeError("catalogue exploded")

    def list_categories(self):
        raise RuntimeError("catalogue exploded")


class BrokenAuth:
    def login(self, username, password):
        raise RuntimeError("auth exploded")


def test_handler_failures_return_fixed_500_body():
    app.dependency_overrides[get_catalogue_client] = lambda: BrokenCatalogue()
    app.dependency_overrides[get_auth_client] = lambda: BrokenAuth()
    try:
        for response in (
            client.get("/api/products"),
            client.get("/api/categories"),
            client.post("/api/auth/login", json={"username": "a", "password": "b"}),
        ):
            assert response.status_code == 500
            assert response.json() == {"error": "Internal server error"}
    finally:
        app.dependency_overrides.clear()


def test_cors_allows_development_origin():
    response = client.options(
        "/api/products",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
