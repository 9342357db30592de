"""
Component tests for the storefront API.

These run the real routes, stores and cart engine against temp-dir JSON
documents through FastAPI's TestClient.
"""

import json

from fastapi.testclient import TestClient

from storefront.core.config import Settings, get_settings
from storefront.main import app

ALICE = {"X-User-Email": "alice@example.com"}


class TestProducts:

    def test_list_products_without_auth(self, test_client: TestClient):
        response = test_client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data] == [1, 2, 3, 5]
        assert set(data[0]) == {"id", "title", "price", "image", "stock"}


class TestRegisterAndLogin:

    def test_register(self, test_client: TestClient, database):
        response = test_client.post("/api/register", json={"email": "bob@example.com", "password": "pw"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "email": "bob@example.com"}
        assert database.read()["carts"]["bob@example.com"] == {"items": []}

    def test_register_twice_conflicts(self, test_client: TestClient, registered_user):
        response = test_client.post("/api/register", json={"email": registered_user, "password": "other"})

        assert response.status_code == 409
        assert response.json()["error"] == "User already exists"

        # First account still logs in with its original password
        login = test_client.post("/api/login", json={"email": registered_user, "password": "secret"})
        assert login.status_code == 200

    def test_register_requires_email(self, test_client: TestClient):
        response = test_client.post("/api/register", json={"email": "", "password": "pw"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_register_rejects_blank_email(self, test_client: TestClient):
        response = test_client.post("/api/register", json={"email": "   ", "password": "pw"})

        assert response.status_code == 400

    def test_padded_email_shares_cart_key(self, test_client: TestClient, database):
        response = test_client.post("/api/register", json={"email": " dave@example.com ", "password": "pw"})
        assert response.json()["email"] == "dave@example.com"

        dave = {"X-User-Email": "dave@example.com"}
        test_client.post("/api/cart/items", json={"product_id": 1}, headers=dave)

        db = database.read()
        assert list(db["carts"]) == ["dave@example.com"]
        assert db["carts"]["dave@example.com"]["items"][0]["id"] == 1
        assert db["users"][0]["email"] == "dave@example.com"

        login = test_client.post("/api/login", json={"email": "dave@example.com ", "password": "pw"})
        assert login.status_code == 200

    def test_login_success(self, test_client: TestClient, registered_user):
        response = test_client.post("/api/login", json={"email": registered_user, "password": "secret"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "email": registered_user}

    def test_login_wrong_password(self, test_client: TestClient, registered_user):
        response = test_client.post("/api/login", json={"email": registered_user, "password": "nope"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"


class TestGetCart:

    def test_missing_identity_is_unauthorized(self, test_client: TestClient):
        response = test_client.get("/api/cart")

        assert response.status_code == 401
        assert response.json()["error"] == "No user email provided"

    def test_new_account_has_empty_cart(self, test_client: TestClient, registered_user):
        response = test_client.get("/api/cart", headers={"X-User-Email": registered_user})

        assert response.status_code == 200
        assert response.json() == {"items": []}

    def test_identity_from_query_string(self, test_client: TestClient, registered_user):
        test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)

        response = test_client.get("/api/cart", params={"email": registered_user})

        assert response.json()["items"][0]["id"] == 1

    def test_unknown_email_gets_empty_cart(self, test_client: TestClient):
        response = test_client.get("/api/cart", headers={"X-User-Email": "ghost@example.com"})

        assert response.status_code == 200
        assert response.json() == {"items": []}


class TestReplaceCart:

    def test_wrapped_cart_payload(self, test_client: TestClient, registered_user):
        cart = {"items": [{"id": 2, "title": "Keyboard", "price": 89.5, "image": "k.jpg", "quantity": 2}]}

        response = test_client.post("/api/cart", json={"cart": cart}, headers=ALICE)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert test_client.get("/api/cart", headers=ALICE).json() == cart

    def test_bare_cart_payload(self, test_client: TestClient, registered_user):
        cart = {"items": [{"id": 1, "title": "Headphones", "price": 129.99, "image": "h.jpg", "quantity": 1}]}

        response = test_client.post("/api/cart", json=cart, headers=ALICE)

        assert response.status_code == 200
        assert test_client.get("/api/cart", headers=ALICE).json() == cart

    def test_identity_from_body(self, test_client: TestClient, registered_user):
        response = test_client.post("/api/cart", json={"email": registered_user, "cart": {"items": []}})

        assert response.status_code == 200

    def test_missing_identity_is_unauthorized(self, test_client: TestClient):
        response = test_client.post("/api/cart", json={"cart": {"items": []}})

        assert response.status_code == 401

    def test_zero_quantity_rejected(self, test_client: TestClient, registered_user, database):
        before = database.read()
        cart = {"items": [{"id": 1, "title": "Headphones", "price": 1.0, "image": "h.jpg", "quantity": 0}]}

        response = test_client.post("/api/cart", json={"cart": cart}, headers=ALICE)

        assert response.status_code == 400
        assert database.read() == before

    def test_duplicate_product_lines_rejected(self, test_client: TestClient, registered_user, database):
        before = database.read()
        line = {"id": 1, "title": "Headphones", "price": 1.0, "image": "h.jpg", "quantity": 1}

        wrapped = test_client.post("/api/cart", json={"cart": {"items": [line, line]}}, headers=ALICE)
        bare = test_client.post("/api/cart", json={"items": [line, line]}, headers=ALICE)

        assert wrapped.status_code == 400
        assert wrapped.json()["code"] == "VALIDATION_ERROR"
        assert bare.status_code == 400
        assert database.read() == before


class TestAddToCart:

    def test_add_creates_line(self, test_client: TestClient, registered_user):
        response = test_client.post("/api/cart/items", json={"product_id": 2}, headers=ALICE)

        assert response.status_code == 200
        data = response.json()
        assert data["cart"]["items"] == [
            {"id": 2, "title": "Keyboard", "price": 89.5, "image": "https://img.test/2.jpg", "quantity": 1},
        ]
        assert data["total"] == 89.5
        assert data["item_count"] == 1

    def test_add_twice_increments(self, test_client: TestClient, registered_user):
        test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)
        test_client.post("/api/cart/items", json={"product_id": 2}, headers=ALICE)
        response = test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)

        items = response.json()["cart"]["items"]
        assert [(i["id"], i["quantity"]) for i in items] == [(1, 2), (2, 1)]

    def test_out_of_stock_leaves_stored_cart_unchanged(self, test_client: TestClient, registered_user, db_path):
        test_client.post("/api/cart/items", json={"product_id": 3}, headers=ALICE)
        before = db_path.read_bytes()

        response = test_client.post("/api/cart/items", json={"product_id": 3}, headers=ALICE)

        assert response.status_code == 400
        assert response.json()["code"] == "OUT_OF_STOCK"
        assert db_path.read_bytes() == before

    def test_zero_stock_product(self, test_client: TestClient, registered_user):
        response = test_client.post("/api/cart/items", json={"product_id": 5}, headers=ALICE)

        assert response.status_code == 400
        assert test_client.get("/api/cart", headers=ALICE).json() == {"items": []}

    def test_unknown_product(self, test_client: TestClient, registered_user):
        response = test_client.post("/api/cart/items", json={"product_id": 999}, headers=ALICE)

        assert response.status_code == 404
        assert response.json()["error"] == "Product not found"

    def test_stock_checked_against_catalog(self, test_client: TestClient, registered_user, catalog_path):
        test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)

        # Catalog is reloaded per request, so a stock drop applies immediately
        catalog = json.loads(catalog_path.read_text())
        catalog[0]["stock"] = 1
        catalog_path.write_text(json.dumps(catalog))

        response = test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)
        assert response.status_code == 400

    def test_requires_identity(self, test_client: TestClient):
        response = test_client.post("/api/cart/items", json={"product_id": 1})

        assert response.status_code == 401


class TestRemoveFromCart:

    def test_remove_decrements(self, test_client: TestClient, registered_user):
        test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)
        test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)

        response = test_client.delete("/api/cart/items/1", headers=ALICE)

        assert response.status_code == 200
        assert response.json()["cart"]["items"][0]["quantity"] == 1

    def test_remove_last_unit_drops_line(self, test_client: TestClient, registered_user):
        test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)
        test_client.post("/api/cart/items", json={"product_id": 2}, headers=ALICE)

        response = test_client.delete("/api/cart/items/1", headers=ALICE)

        assert [i["id"] for i in response.json()["cart"]["items"]] == [2]
        assert [i["id"] for i in test_client.get("/api/cart", headers=ALICE).json()["items"]] == [2]

    def test_remove_absent_is_success(self, test_client: TestClient, registered_user):
        response = test_client.delete("/api/cart/items/1", headers=ALICE)

        assert response.status_code == 200
        assert response.json()["cart"] == {"items": []}

    def test_requires_identity(self, test_client: TestClient):
        assert test_client.delete("/api/cart/items/1").status_code == 401


class TestCartIsolation:

    def test_accounts_do_not_share_carts(self, test_client: TestClient):
        bob = {"X-User-Email": "bob@example.com"}
        test_client.post("/api/register", json={"email": "alice@example.com", "password": "a"})
        test_client.post("/api/register", json={"email": "bob@example.com", "password": "b"})
        test_client.post("/api/cart/items", json={"product_id": 2}, headers=bob)

        test_client.post("/api/cart/items", json={"product_id": 1}, headers=ALICE)
        test_client.delete("/api/cart/items/2", headers=ALICE)

        bob_items = test_client.get("/api/cart", headers=bob).json()["items"]
        assert [(i["id"], i["quantity"]) for i in bob_items] == [(2, 1)]


class TestServiceEndpoints:

    def test_health(self, test_client: TestClient):
        assert test_client.get("/health").json() == {"status": "healthy", "service": "storefront"}

    def test_debug_db_hidden_by_default(self, test_client: TestClient):
        assert test_client.get("/api/debug/db").status_code == 404

    def test_debug_db_in_debug_mode(self, test_client: TestClient, registered_user, settings):
        app.dependency_overrides[get_settings] = lambda: Settings(**{**settings.model_dump(), "debug": True})

        response = test_client.get("/api/debug/db")

        assert response.status_code == 200
        assert response.json()["users"][0]["email"] == registered_user
