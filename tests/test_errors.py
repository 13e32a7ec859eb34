# tests/test_errors.py
import logging

from fastapi.testclient import TestClient

from app.database import ProductStore, SEED_PRODUCTS
from app.main import create_app

KEY = {"apikey": "12345"}


class ExplodingStore(ProductStore):
    def list(self):
        raise RuntimeError("disk on fire")


def test_unhandled_error_is_500(settings, caplog):
    client = TestClient(create_app(settings=settings, store=ExplodingStore(seed=SEED_PRODUCTS)))
    with caplog.at_level(logging.ERROR, logger="app.middleware"):
        r = client.get("/api/products", params=KEY)
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}
    assert "disk on fire" not in r.text
    # traceback stays server side
    assert any(rec.exc_info and "disk on fire" in str(rec.exc_info[1]) for rec in caplog.records)


def test_other_routes_unaffected_by_failing_list(settings):
    client = TestClient(create_app(settings=settings, store=ExplodingStore(seed=SEED_PRODUCTS)))
    assert client.get("/api/products/1", params=KEY).status_code == 200


def test_unknown_route_is_404(client):
    r = client.get("/api/orders", params=KEY)
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_unsupported_method_is_404(client):
    r = client.patch("/api/products/1", params=KEY, json={})
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_every_request_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.requests"):
        client.get("/api/products/2", params=KEY)
        client.get("/api/products")
        client.get("/")

    lines = [rec.getMessage() for rec in caplog.records if rec.name == "app.requests"]
    assert len(lines) == 3
    assert lines[0].endswith("GET request for '/api/products/2'")
    # rejected requests are still logged, and the key never is
    assert lines[1].endswith("GET request for '/api/products'")
    assert all("12345" not in line for line in lines)
    # leading ISO-8601 timestamp
    assert lines[0].split(" ", 1)[0][:4].isdigit() and "T" in lines[0].split(" ", 1)[0]
