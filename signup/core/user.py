"""User — registration candidate and stored account.

Invariants:
    - Fields are nullable on construction; the validator decides what is acceptable
    - Equality is by field values, identity is what the store keeps

Design Decisions:
    - Mutable dataclass: the registrar writes trimmed credentials back onto
      the caller's object so the returned record is the same instance
"""

from dataclasses import dataclass


@dataclass
class User:
    """Account record — pure dataclass, no IO."""

    id: object = None  # opaque, never validated
    login: str | None = None
    password: str | None = None
    age: int | None = None

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, login={self.login!r}, age={self.age!r})"
