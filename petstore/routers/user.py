from __future__ import annotations

from typing import List

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from petstore.deps import get_user_service
from petstore.models import User
from petstore.user_service import NotFound, UserService

router = APIRouter(prefix="/user", tags=["user"])

_not_found = {status.HTTP_404_NOT_FOUND: {"description": "User not found"}}


def _ok() -> Response:
    return Response(status_code=status.HTTP_200_OK)


# /login, /logout and /createWith* are declared before /{username} so the
# literal paths win the match.


@router.get("/login", response_class=PlainTextResponse)
def login_user(
    username: str | None = Query(default=None, description="The user name for login"),
    password: str | None = Query(default=None, description="The password for login in clear text"),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Logs user into the system. Credentials are not checked."""
    session = service.login_user(username, password)
    return PlainTextResponse(
        session.message,
        headers={"X-Expires-After": session.expires_after, "X-Rate-Limit": session.rate_limit},
    )


@router.get("/logout")
def logout_user(service: UserService = Depends(get_user_service)) -> Response:
    service.logout_user()
    return _ok()


@router.post("")
def create_user(user: User = Body(...), service: UserService = Depends(get_user_service)) -> Response:
    service.create_user(user)
    return _ok()


@router.post("/createWithArray")
def create_users_with_array_input(
    users: List[User] = Body(...), service: UserService = Depends(get_user_service)
) -> Response:
    service.create_users(users)
    return _ok()


@router.post("/createWithList")
def create_users_with_list_input(
    users: List[User] = Body(...), service: UserService = Depends(get_user_service)
) -> Response:
    service.create_users(users)
    return _ok()


@router.get("/{username}", response_model=User, responses=_not_found)
def get_user_by_name(username: str, service: UserService = Depends(get_user_service)) -> Response:
    result = service.get_user_by_name(username)
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(result.to_json())


@router.put("/{username}")
def update_user(username: str, user: User = Body(...), service: UserService = Depends(get_user_service)) -> Response:
    service.update_user(username, user)
    return _ok()


@router.delete("/{username}", responses=_not_found)
def delete_user(username: str, service: UserService = Depends(get_user_service)) -> Response:
    result = service.delete_user(username)
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return _ok()
