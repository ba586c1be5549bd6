# tests/test_errors.py
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_api.config import settings
from catalog_api.errors import (
    NotFoundError, UnauthorizedError, ValidationError,
    REQUIRED_FIELDS_MESSAGE, describe_validation_errors, register_error_handlers,
)
from catalog_api.main import app

client = TestClient(app)

def _app_with_failing_routes() -> FastAPI:
    failing = FastAPI()
    register_error_handlers(failing)

    @failing.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    @failing.get("/denied")
    async def denied():
        raise UnauthorizedError()

    return failing

def test_error_kinds_carry_status_codes():
    assert NotFoundError().status_code == 404
    assert ValidationError().status_code == 400
    assert UnauthorizedError().status_code == 401
    assert NotFoundError().message == "Resource not found"
    assert ValidationError("bad").message == "bad"
    assert UnauthorizedError().is_operational is True

def test_unexpected_errors_are_reported_generically():
    failing_client = TestClient(_app_with_failing_routes(), raise_server_exceptions=False)
    r = failing_client.get("/boom")
    assert r.status_code == 500
    assert r.json() == {"status": "error", "message": "Something went wrong on the server"}
    assert "hunter2" not in r.text

def test_operational_errors_use_envelope():
    failing_client = TestClient(_app_with_failing_routes())
    r = failing_client.get("/denied")
    assert r.status_code == 401
    assert r.json() == {"status": "error", "message": "Unauthorized access"}

def test_unknown_route_uses_envelope():
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json()["status"] == "error"

def test_wrong_method_uses_envelope():
    r = client.patch("/api/products/1", json={})
    assert r.status_code == 405
    assert r.json()["status"] == "error"

def test_root_says_hello():
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Hello World!"

def test_describe_validation_errors_prefers_missing_fields():
    errors = [
        {"type": "string_too_short", "loc": ("body", "name"), "msg": "too short"},
        {"type": "missing", "loc": ("body", "price"), "msg": "Field required"},
    ]
    assert describe_validation_errors(errors) == REQUIRED_FIELDS_MESSAGE
    assert describe_validation_errors([]) == "Invalid data provided"
    assert describe_validation_errors([{"type": "x", "loc": ("body", "colour"), "msg": "?"}]) == "Invalid data provided"

def test_api_key_is_not_enforced_by_default():
    client.post("/reset")
    assert settings.require_api_key is False
    r = client.post("/api/products", json={"name": "Mouse", "price": 25, "category": "electronics"})
    assert r.status_code == 201

def test_api_key_enforced_on_mutations_when_enabled(monkeypatch):
    client.post("/reset")
    monkeypatch.setattr(settings, "require_api_key", True)
    monkeypatch.setattr(settings, "api_key", "s3cret")

    r = client.post("/api/products", json={"name": "Mouse", "price": 25, "category": "electronics"})
    assert r.status_code == 401
    assert r.json() == {"status": "error", "message": "Unauthorized: Invalid or missing API key"}

    r = client.delete("/api/products/1", headers={"X-API-Key": "wrong"})
    assert r.status_code == 401

    r = client.put("/api/products/1", json={"inStock": False}, headers={"X-API-Key": "s3cret"})
    assert r.status_code == 200

    # reads stay open
    assert client.get("/api/products/1").status_code == 200
