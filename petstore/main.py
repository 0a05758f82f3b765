from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from petstore.deps import get_user_store
from petstore.logging_config import configure_logging
from petstore.models import Health
from petstore.routers.user import router as user_router
from petstore.scope_gate import ScopeGateMiddleware, pet_routes
from petstore.settings import Settings, get_settings
from petstore.user_service import UserService
from petstore.user_store import InMemoryUserStore

logger = logging.getLogger("petstore")

APP_VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API: store, seed data, service, user routes and the pet scope gate."""
    s = settings or get_settings()

    store = InMemoryUserStore()
    if s.seed_users:
        store.seed()

    app = FastAPI(title="OpenAPI Petstore", version=APP_VERSION)
    app.state.settings = s
    app.state.user_store = store
    app.state.user_service = UserService(store, session_ttl_seconds=s.session_ttl_seconds)

    app.include_router(user_router, prefix=s.base_path)
    app.add_middleware(ScopeGateMiddleware, secret=s.auth_secret, routes=pet_routes(s.base_path))

    @app.get("/healthz", response_model=Health)
    def healthz(store: InMemoryUserStore = Depends(get_user_store)) -> Health:
        return Health(ok=True, service="petstore", version=APP_VERSION, users=len(store))

    logger.info("Petstore API ready (base_path=%r, users=%d)", s.base_path or "/", len(store))
    return app


_settings = get_settings()
configure_logging(_settings.log_level)

app = create_app(_settings)
