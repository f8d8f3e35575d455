"""In-Memory User Store — login-keyed collection of registered users.

Invariants:
    - At most one user per login (dict keyed by login); seeding with a repeated login raises ValueError
    - add() stores and returns the very object it was given
    - Iteration follows insertion order

Design Decisions:
    - Plain dict, no database: state lives for the life of the process
    - add() does not re-check uniqueness; the registrar serializes get-then-add
"""

from collections.abc import Iterable

from signup.core.user import User


class InMemoryUserStore:
    """UserStore backed by a dict. Not thread-safe on its own."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: dict[str, User] = {}
        for user in users:
            if user.login in self._users:
                raise ValueError(f"Duplicate login in seed users: '{user.login}'")
            self.add(user)

    def get(self, login: str) -> User | None:
        return self._users.get(login)

    def add(self, user: User) -> User:
        self._users[user.login] = user
        return user

    def all(self) -> list[User]:
        return list(self._users.values())

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, login: object) -> bool:
        return login in self._users


# Singleton (initialized on startup)
user_store: InMemoryUserStore | None = None


def init_store(users: Iterable[User] = ()) -> InMemoryUserStore:
    global user_store
    user_store = InMemoryUserStore(users)
    return user_store


def get_user_store() -> InMemoryUserStore:
    """FastAPI dependency for the process-wide store."""
    if user_store is None:
        raise RuntimeError("User store not initialized")
    return user_store
