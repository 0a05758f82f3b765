from __future__ import annotations

import os
import sys
import urllib.parse

import requests


def main() -> int:
    # Point at a running server, e.g. `python -m petstore`.
    base = (os.getenv("PETSTORE_URL") or "http://127.0.0.1:8080/v3").rstrip("/")

    def call(method: str, path: str, **kwargs) -> requests.Response | None:
        try:
            r = requests.request(method, base + path, timeout=10, **kwargs)
        except requests.exceptions.RequestException as e:
            print(f"{method} {path}: request failed: {e.__class__.__name__}: {e}")
            return None
        print(f"{method} {path}", r.status_code, r.text[:200])
        return r

    r = call("GET", "/user/" + urllib.parse.quote("user?10", safe=""))
    if r is None or r.status_code != 200:
        return 1

    r = call("GET", "/user/login", params={"username": "user1", "password": "anything"})
    if r is None or r.status_code != 200:
        return 1
    print("X-Expires-After:", r.headers.get("X-Expires-After"))
    print("X-Rate-Limit:", r.headers.get("X-Rate-Limit"))

    smoke = {"id": 999, "username": "smoke", "firstName": "Smoke", "password": "secret", "userStatus": 1}
    for method, path, kwargs, expected in (
        ("POST", "/user", {"json": smoke}, 200),
        ("GET", "/user/smoke", {}, 200),
        ("DELETE", "/user/smoke", {}, 200),
        ("DELETE", "/user/smoke", {}, 404),
        ("GET", "/pet/findByStatus", {}, 401),
    ):
        r = call(method, path, **kwargs)
        if r is None or r.status_code != expected:
            print(f"expected HTTP {expected}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
