"""
Shared fixtures: every test gets a fresh application bound to its own
in-memory SQLite database.
"""
import pytest
from fastapi.testclient import TestClient

from app.main import create_app

DEFAULT_PASSWORD = "abcdefgh"


@pytest.fixture
def app():
    return create_app("sqlite://")


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(client):
    def _make_user(name="Ana Silva", email="ana@x.com", password=DEFAULT_PASSWORD):
        response = client.post("/user", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()

    return _make_user


@pytest.fixture
def make_store(client, make_user):
    def _make_store(name="Loja A", user_id=None):
        if user_id is None:
            user_id = make_user()["id"]
        response = client.post("/store", json={"name": name, "userId": user_id})
        assert response.status_code == 201, response.text
        return response.json()

    return _make_store


@pytest.fixture
def make_product(client, make_store):
    def _make_product(name="Caneca", price=19.9, store_id=None):
        if store_id is None:
            store_id = make_store()["id"]
        response = client.post("/product", json={"name": name, "price": price, "storeId": store_id})
        assert response.status_code == 201, response.text
        return response.json()

    return _make_product
