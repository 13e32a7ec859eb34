# tests/test_validation.py
import pytest

KEY = {"apikey": "12345"}
INVALID = {
    "error": "Invalid product data. Ensure all fields are correct: name (string), "
             "description (string), price (number), category (string), inStock (boolean)."
}

BAD_FIELDS = [
    ("name", 42),
    ("name", None),
    ("description", ["Wireless"]),
    ("category", {"kind": "electronics"}),
    ("price", "25"),
    ("price", True),
    ("price", None),
    ("inStock", "true"),
    ("inStock", 1),
]


@pytest.mark.parametrize("field,value", BAD_FIELDS)
def test_create_rejects_wrong_types(client, mouse, field, value):
    r = client.post("/api/products", params=KEY, json={**mouse, field: value})
    assert r.status_code == 400
    assert r.json() == INVALID
    assert len(client.get("/api/products", params=KEY).json()) == 3


@pytest.mark.parametrize("field,value", BAD_FIELDS)
def test_update_rejects_wrong_types(client, mouse, field, value):
    r = client.put("/api/products/1", params=KEY, json={**mouse, field: value})
    assert r.status_code == 400
    assert r.json() == INVALID
    assert client.get("/api/products/1", params=KEY).json()["name"] == "Laptop"


@pytest.mark.parametrize("missing", ["name", "description", "price", "category", "inStock"])
def test_missing_field_rejected(client, mouse, missing):
    body = {k: v for k, v in mouse.items() if k != missing}
    r = client.post("/api/products", params=KEY, json=body)
    assert r.status_code == 400
    assert r.json() == INVALID


def test_float_price_accepted(client, mouse):
    r = client.post("/api/products", params=KEY, json={**mouse, "price": 19.99})
    assert r.status_code == 201
    assert r.json()["price"] == 19.99


def test_malformed_json_rejected(client):
    r = client.post("/api/products", params=KEY, content=b"{not json",
                    headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert r.json() == INVALID


def test_validation_runs_before_lookup(client):
    r = client.put("/api/products/nope", params=KEY, json={"name": 1})
    assert r.status_code == 400


def test_extra_fields_dropped(client, mouse):
    r = client.post("/api/products", params=KEY, json={**mouse, "color": "black"})
    assert r.status_code == 201
    assert "color" not in r.json()
