"""Registrar — validates a candidate, enforces login uniqueness, inserts into the store.

Invariants:
    - Exactly one store.add() on success, zero on any failure path
    - Returned user IS the candidate (same object), with trimmed login/password
    - Uniqueness check and insert run under one lock per store instance
    - Passwords never logged

Design Decisions:
    - Store injected, no module-level collection: isolated instances per app/test
    - Lock registry keyed by id(store): every Registrar bound to the same store
      shares one lock, whatever the store looks like (unhashable, __slots__)
    - Registry entry released with the store when it supports weak references,
      otherwise the entry pins the store so its id is never reused
"""

import logging
import threading
import weakref
from typing import NoReturn

from signup.core.enforce_registration import (
    duplicate_login, trim_credentials, validate_registration,
)
from signup.core.errors import ErrorContext, Rejection, error_for
from signup.core.repository_protocols import UserStore
from signup.core.user import User

logger = logging.getLogger(__name__)

# id(store) -> (lock, pinned store or None)
_store_locks: dict[int, tuple[threading.Lock, object]] = {}
# Reentrant: a finalizer can fire during GC while this thread holds the guard
_registry_guard = threading.RLock()


def lock_for(store: UserStore) -> threading.Lock:
    """The mutual-exclusion lock scoped to this store instance."""
    key = id(store)
    with _registry_guard:
        entry = _store_locks.get(key)
        if entry is None:
            entry = _store_locks[key] = (threading.Lock(), _pin(store, key))
        return entry[0]


def _pin(store: UserStore, key: int) -> object:
    """None when a finalizer drops the entry with the store, else the store itself."""
    try:
        weakref.finalize(store, _release_lock, key)
    except TypeError:
        # No weakref support (__slots__ without __weakref__): holding the store
        # keeps id(store) from being reused by another store
        return store
    return None


def _release_lock(key: int) -> None:
    with _registry_guard:
        _store_locks.pop(key, None)


class Registrar:
    """Registers users into a UserStore."""

    def __init__(self, store: UserStore):
        self.store = store
        self._lock = lock_for(store)

    def check(self, candidate: User | None) -> Rejection | None:
        """Result form of register(): first rejection, duplicate included. Never inserts."""
        rejection = validate_registration(candidate)
        if rejection:
            return rejection
        login, _ = trim_credentials(candidate)
        if self.store.get(login) is not None:
            return duplicate_login(login)
        return None

    def register(self, candidate: User | None) -> User:
        """Register a candidate. Raises the RegistrationError matching the first failed rule."""
        rejection = validate_registration(candidate)
        if rejection:
            self._reject(rejection, candidate)

        login, password = trim_credentials(candidate)
        with self._lock:
            if self.store.get(login) is not None:
                self._reject(duplicate_login(login), candidate, login)
            candidate.login = login
            candidate.password = password
            self.store.add(candidate)

        logger.info(
            f"Registered user '{login}'",
            extra={"login": login, "user_id": candidate.id},
        )
        return candidate

    def _reject(
        self, rejection: Rejection, candidate: User | None, login: str | None = None,
    ) -> NoReturn:
        if login is None and candidate is not None:
            login = candidate.login
        logger.warning(
            f"Registration rejected: {rejection.message}",
            extra={"error_code": rejection.kind.value, "login": login},
        )
        raise error_for(rejection, ErrorContext(login=login))
