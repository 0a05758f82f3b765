from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from petstore.auth import READ_PETS, WRITE_PETS, bearer_token, verify_token

logger = logging.getLogger("petstore.scope_gate")

REQUIRED_PET_SCOPES: FrozenSet[str] = frozenset({READ_PETS, WRITE_PETS})


@dataclass(frozen=True)
class ProtectedRoute:
    """A path (or subtree, when ``subtree`` is set) guarded for some methods.

    ``methods=None`` guards every method.
    """

    path: str
    methods: Optional[FrozenSet[str]] = None
    subtree: bool = False

    def matches(self, method: str, path: str) -> bool:
        if self.methods is not None and method.upper() not in self.methods:
            return False
        if path == self.path:
            return True
        return self.subtree and path.startswith(self.path + "/")


def pet_routes(base_path: str) -> Tuple[ProtectedRoute, ...]:
    return (
        ProtectedRoute(f"{base_path}/pet"),
        ProtectedRoute(f"{base_path}/pet/findByStatus"),
        ProtectedRoute(f"{base_path}/pet", methods=frozenset({"POST"}), subtree=True),
    )


class ScopeGateMiddleware(BaseHTTPMiddleware):
    """Reject requests to protected routes unless the bearer token carries every required scope.

    Missing or invalid tokens get 401, tokens short of a scope get 403.
    Requests to any other route pass through untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        secret: str,
        routes: Iterable[ProtectedRoute],
        required_scopes: Iterable[str] = REQUIRED_PET_SCOPES,
    ):
        super().__init__(app)
        self._secret = secret
        self._routes = tuple(routes)
        self._required = frozenset(required_scopes)

    def is_protected(self, method: str, path: str) -> bool:
        path = path.rstrip("/") or "/"
        return any(r.matches(method, path) for r in self._routes)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.is_protected(request.method, request.url.path):
            return await call_next(request)

        token = bearer_token(request.headers.get("authorization"))
        claims = verify_token(token=token, secret=self._secret) if token else None
        if claims is None:
            logger.warning("Rejected %s %s: missing or invalid bearer token", request.method, request.url.path)
            return JSONResponse(
                {"detail": "Not authenticated"},
                status_code=status.HTTP_401_UNAUTHORIZED,
                headers={"WWW-Authenticate": "Bearer"},
            )

        missing = sorted(self._required - claims.scopes)
        if missing:
            logger.warning(
                "Rejected %s %s for %r: missing scopes %s",
                request.method,
                request.url.path,
                claims.subject,
                ", ".join(missing),
            )
            return JSONResponse(
                {"detail": "Insufficient scope (missing: " + " ".join(missing) + ")"},
                status_code=status.HTTP_403_FORBIDDEN,
                headers={
                    "WWW-Authenticate": 'Bearer error="insufficient_scope", scope="%s"' % " ".join(sorted(self._required))
                },
            )

        request.state.claims = claims
        return await call_next(request)
