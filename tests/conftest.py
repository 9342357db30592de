"""Shared fixtures: stores backed by temp-dir JSON documents and an app wired to them."""

import json

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings, get_settings
from storefront.database.accounts import AccountDatabase
from storefront.database.carts import CartDatabase
from storefront.database.document import JsonDocument, open_database
from storefront.database.products import ProductDatabase
from storefront.dependencies import get_account_db, get_cart_db, get_database, get_product_db
from storefront.main import app

CATALOG = [
    {"id": 1, "title": "Headphones", "price": 129.99, "image": "https://img.test/1.jpg", "stock": 5},
    {"id": 2, "title": "Keyboard", "price": 89.5, "image": "https://img.test/2.jpg", "stock": 2},
    {"id": 3, "title": "Poster", "price": 25.0, "image": "https://img.test/3.jpg", "stock": 1},
    {"id": 5, "title": "Lamp", "price": 45.0, "image": "https://img.test/5.jpg", "stock": 0},
]


@pytest.fixture
def catalog_path(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(CATALOG))
    return path


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def database(db_path) -> JsonDocument:
    return open_database(str(db_path))


@pytest.fixture
def product_db(catalog_path) -> ProductDatabase:
    return ProductDatabase(JsonDocument(str(catalog_path)))


@pytest.fixture
def account_db(database) -> AccountDatabase:
    return AccountDatabase(database)


@pytest.fixture
def cart_db(database) -> CartDatabase:
    return CartDatabase(database)


@pytest.fixture
def settings(db_path, catalog_path) -> Settings:
    return Settings(db_path=str(db_path), products_path=str(catalog_path), debug=False)


@pytest.fixture
def test_client(settings, database, product_db, account_db, cart_db):
    """TestClient whose stores all point at the temp documents"""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_product_db] = lambda: product_db
    app.dependency_overrides[get_account_db] = lambda: account_db
    app.dependency_overrides[get_cart_db] = lambda: cart_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(test_client):
    """Email of an account registered through the API"""
    email = "alice@example.com"
    response = test_client.post("/api/register", json={"email": email, "password": "secret"})
    assert response.status_code == 200
    return email
