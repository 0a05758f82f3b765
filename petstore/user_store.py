from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional

from petstore.models import User
from petstore.seed import SEED_USERS

logger = logging.getLogger("petstore.store")


class InMemoryUserStore:
    """Thread-safe in-memory user store keyed by username.

    Storage semantics:
    - Stored only in the API process memory (cleared on restart).
    - Not shared across multiple API instances.
    - ``put`` overwrites any existing record with the same username (no merge).

    Each call takes the store-wide lock, so individual reads and writes are
    atomic. Sequences of calls are not: two concurrent updates of the same
    username resolve as last-write-wins, and ``bulk_put`` may be observed
    half-applied.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[Optional[str], User] = {}

    def get(self, username: Optional[str]) -> Optional[User]:
        with self._lock:
            user = self._users.get(username)
        # Hand out copies so callers can't mutate stored records in place.
        return user.model_copy() if user is not None else None

    def put(self, user: User) -> None:
        record = user.model_copy()
        with self._lock:
            self._users[record.username] = record

    def delete(self, user: User) -> None:
        with self._lock:
            self._users.pop(user.username, None)

    def bulk_put(self, users: Iterable[User]) -> None:
        for user in users:
            self.put(user)

    def seed(self, users: Optional[Iterable[User]] = None) -> None:
        """Load the fixed startup records.

        Called once by the application factory right after construction.
        """
        users = list(SEED_USERS if users is None else users)
        self.bulk_put(users)
        logger.info("Seeded user store with %d records", len(users))

    def usernames(self) -> List[Optional[str]]:
        with self._lock:
            return list(self._users)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
