from __future__ import annotations

from fastapi import Request

from petstore.user_service import UserService
from petstore.user_store import InMemoryUserStore

# The store and service are built once by create_app() and hung off app.state;
# these dependencies only look them up, so tests can override either one.


def get_user_store(request: Request) -> InMemoryUserStore:
    return request.app.state.user_store


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
