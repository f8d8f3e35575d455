"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Store implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, any object with get/add qualifies
    - Synchronous: registration has no suspension points
"""

from typing import Protocol

from signup.core.user import User


class UserStore(Protocol):
    """Contract for registered-user storage, keyed by login — implemented by shell."""
    def get(self, login: str) -> User | None: ...
    def add(self, user: User) -> User: ...
