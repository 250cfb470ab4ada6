"""
In-memory user directory.

The ``UserStore`` owns the mapping from user identifier to record and
serialises every read and write with a single lock, so concurrent
request handlers never observe a half-applied change.  Records handed
back to callers are always copies; the underlying mapping never
leaves the store.

Two identifier policies are available:

* ``sequential`` (default) – identifiers come from a counter that only
  grows, so an identifier is never issued twice even after deletions.
* ``count`` – the identifier is the current number of records plus one.
  This reproduces the behaviour of earlier releases, where a create
  following a delete may reuse the identifier of a live record and
  overwrite it.
"""

import threading
from typing import Dict, List

from ..schemas.user import UserRead


ID_POLICY_SEQUENTIAL = "sequential"
ID_POLICY_COUNT = "count"
ID_POLICIES = (ID_POLICY_SEQUENTIAL, ID_POLICY_COUNT)


class UserNotFoundError(LookupError):
    """Raised when no user exists for the requested identifier."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserStore:
    """Thread-safe container for user records."""

    def __init__(self, id_policy: str = ID_POLICY_SEQUENTIAL) -> None:
        if id_policy not in ID_POLICIES:
            raise ValueError(
                f"Unknown id policy {id_policy!r}; expected one of {', '.join(ID_POLICIES)}"
            )
        self.id_policy = id_policy
        self._lock = threading.Lock()
        self._users: Dict[str, UserRead] = {}
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def _next_id(self) -> str:
        # Caller must hold the lock.
        if self.id_policy == ID_POLICY_COUNT:
            return str(len(self._users) + 1)
        self._last_id += 1
        return str(self._last_id)

    def _snapshot(self) -> List[UserRead]:
        # Caller must hold the lock.
        return [user.model_copy() for user in self._users.values()]

    def create(self, name: str) -> UserRead:
        """Insert a new user and return it with its assigned identifier."""
        with self._lock:
            user = UserRead(id=self._next_id(), name=name)
            self._users[user.id] = user
            return user.model_copy()

    def get(self, user_id: str) -> UserRead:
        """Return the user stored under ``user_id``.

        Raises ``UserNotFoundError`` if there is no such user.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return user.model_copy()

    def list(self) -> List[UserRead]:
        """Return a snapshot of all users."""
        with self._lock:
            return self._snapshot()

    def update(self, user_id: str, name: str) -> UserRead:
        """Rename an existing user; the identifier never changes."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            user.name = name
            return user.model_copy()

    def delete(self, user_id: str) -> List[UserRead]:
        """Remove a user if present and return the remaining users.

        Deleting an unknown identifier is a no-op, so repeated deletes
        return the same result.
        """
        with self._lock:
            self._users.pop(user_id, None)
            return self._snapshot()
