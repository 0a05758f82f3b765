from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from petstore.auth import READ_PETS, WRITE_PETS, issue_token
from petstore.main import create_app
from petstore.scope_gate import ScopeGateMiddleware, pet_routes
from petstore.settings import Settings

SECRET = "test-secret"


def _pet_app(base_path: str = "/v3") -> FastAPI:
    app = FastAPI()

    @app.get(base_path + "/pet")
    def list_pets(request: Request):
        return {"sub": request.state.claims.subject}

    @app.put(base_path + "/pet")
    def update_pet():
        return {"ok": True}

    @app.get(base_path + "/pet/findByStatus")
    def find_by_status():
        return []

    @app.get(base_path + "/pet/{pet_id}")
    def get_pet(pet_id: int):
        return {"id": pet_id}

    @app.post(base_path + "/pet/{pet_id}/uploadImage")
    def upload_image(pet_id: int):
        return {"id": pet_id}

    app.add_middleware(ScopeGateMiddleware, secret=SECRET, routes=pet_routes(base_path))
    return app


def _auth(*scopes: str, secret: str = SECRET) -> dict:
    return {"Authorization": "Bearer " + issue_token(subject="tester", scopes=scopes, secret=secret)}


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/v3/pet"),
        ("PUT", "/v3/pet"),
        ("GET", "/v3/pet/findByStatus"),
        ("POST", "/v3/pet/7/uploadImage"),
    ],
)
def test_protected_routes_require_a_token(method, path):
    client = TestClient(_pet_app())
    r = client.request(method, path)
    assert r.status_code == 401
    assert r.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.parametrize("scopes", [(), (READ_PETS,), (WRITE_PETS,), ("read:orders", "write:orders")])
def test_protected_routes_require_both_pet_scopes(scopes):
    client = TestClient(_pet_app())
    r = client.get("/v3/pet/findByStatus", headers=_auth(*scopes))
    assert r.status_code == 403
    assert "insufficient_scope" in r.headers["WWW-Authenticate"]


def test_both_scopes_pass_and_expose_claims():
    client = TestClient(_pet_app())
    r = client.get("/v3/pet", headers=_auth(READ_PETS, WRITE_PETS, "extra"))
    assert r.status_code == 200
    assert r.json() == {"sub": "tester"}

    r = client.post("/v3/pet/7/uploadImage", headers=_auth(READ_PETS, WRITE_PETS))
    assert r.status_code == 200


def test_token_signed_with_other_secret_is_rejected():
    client = TestClient(_pet_app())
    r = client.get("/v3/pet", headers=_auth(READ_PETS, WRITE_PETS, secret="someone-else"))
    assert r.status_code == 401


def test_get_single_pet_is_not_gated():
    client = TestClient(_pet_app())
    assert client.get("/v3/pet/7").status_code == 200


def test_base_path_is_respected():
    client = TestClient(_pet_app("/api"))
    assert client.get("/api/pet").status_code == 401
    assert client.get("/v3/pet").status_code == 404


def test_user_routes_are_never_gated():
    client = TestClient(create_app(Settings(auth_secret=SECRET)))
    assert client.get("/v3/user/user1").status_code == 200
    assert client.get("/v3/user/logout").status_code == 200
    assert client.get("/v3/pet").status_code == 401
    # Gate passes, but this service has no pet routes of its own.
    assert client.get("/v3/pet", headers=_auth(READ_PETS, WRITE_PETS)).status_code == 404


def test_is_protected_matching():
    gate = ScopeGateMiddleware(FastAPI(), secret=SECRET, routes=pet_routes("/v3"))
    assert gate.is_protected("GET", "/v3/pet/")
    assert gate.is_protected("DELETE", "/v3/pet")
    assert gate.is_protected("POST", "/v3/pet/1")
    assert not gate.is_protected("DELETE", "/v3/pet/1")
    assert not gate.is_protected("POST", "/v3/petstore")
    assert not gate.is_protected("GET", "/v3/user/login")
