from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Callable, Iterable, Optional, Union

from petstore.models import User
from petstore.user_store import InMemoryUserStore

logger = logging.getLogger("petstore.users")

RATE_LIMIT = "5000"
SESSION_PREFIX = "logged in user session:"
DEFAULT_SESSION_TTL_SECONDS = 60 * 60


@dataclass(frozen=True)
class NotFound:
    """Lookup miss for ``username``; the HTTP layer maps it to 404."""

    username: Optional[str]


@dataclass(frozen=True)
class LoginSession:
    expires_at: datetime
    rate_limit: str = RATE_LIMIT

    @property
    def expires_at_millis(self) -> int:
        return int(self.expires_at.timestamp() * 1000)

    @property
    def expires_after(self) -> str:
        """Expiry as an RFC 7231 HTTP-date, e.g. ``Sun, 18 Oct 2026 12:00:00 GMT``."""
        return format_datetime(self.expires_at.astimezone(timezone.utc), usegmt=True)

    @property
    def message(self) -> str:
        return f"{SESSION_PREFIX}{self.expires_at_millis}"


UserResult = Union[User, NotFound]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserService:
    """User CRUD and session operations over an injected store.

    The service adds no business rules of its own: creates and updates are
    blind overwrites, and login accepts any credentials.
    """

    def __init__(
        self,
        store: InMemoryUserStore,
        *,
        session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self._session_ttl = timedelta(seconds=session_ttl_seconds)
        self._clock = clock

    def create_user(self, user: User) -> None:
        self._store.put(user)
        logger.debug("Stored user %r", user.username)

    def create_users(self, users: Iterable[User]) -> None:
        users = list(users)
        self._store.bulk_put(users)
        logger.debug("Stored %d users", len(users))

    def delete_user(self, username: Optional[str]) -> UserResult:
        user = self._store.get(username)
        if user is None:
            logger.info("Delete requested for unknown user %r", username)
            return NotFound(username)
        self._store.delete(user)
        logger.info("Deleted user %r", username)
        return user

    def get_user_by_name(self, username: Optional[str]) -> UserResult:
        user = self._store.get(username)
        if user is None:
            logger.info("User %r not found", username)
            return NotFound(username)
        return user

    def login_user(self, username: Optional[str], password: Optional[str]) -> LoginSession:
        # No credential check: any username/password pair gets a session.
        session = LoginSession(expires_at=self._clock() + self._session_ttl)
        logger.info("Issued session for %r expiring at %s", username, session.expires_after)
        return session

    def logout_user(self) -> None:
        return None

    def update_user(self, username: Optional[str], user: User) -> None:
        # The path username wins over whatever the body carries.
        self.create_user(user.model_copy(update={"username": username}))
