# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import ProductStore, SEED_PRODUCTS
from app.main import create_app

API_KEY = "12345"


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, api_key_param="apikey", public_paths=["/"], seed_products=True)


@pytest.fixture
def store():
    return ProductStore(seed=SEED_PRODUCTS)


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mouse():
    return {"name": "Mouse", "description": "Wireless", "price": 25, "category": "electronics", "inStock": True}
