# tests/test_config.py
from app.config import Settings


def test_defaults(monkeypatch):
    for var in ("PORT", "HOST", "API_KEY", "API_KEY_PARAM", "PUBLIC_PATHS", "SEED_PRODUCTS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.port == 3000
    assert s.api_key == "12345"
    assert s.api_key_param == "apikey"
    assert s.public_paths == ["/"]
    assert s.seed_products is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8085")
    monkeypatch.setenv("API_KEY", "abc")
    monkeypatch.setenv("PUBLIC_PATHS", '["/", "/docs", "/openapi.json"]')
    monkeypatch.setenv("SEED_PRODUCTS", "false")
    s = Settings(_env_file=None)
    assert s.port == 8085
    assert s.api_key == "abc"
    assert s.public_paths == ["/", "/docs", "/openapi.json"]
    assert s.seed_products is False


def test_unseeded_app_starts_empty(monkeypatch):
    from fastapi.testclient import TestClient
    from app.main import create_app

    app = create_app(settings=Settings(_env_file=None, seed_products=False))
    r = TestClient(app).get("/api/products", params={"apikey": "12345"})
    assert r.json() == []
