"""User Schemas — Pydantic models for the registration API boundary.

Invariants:
    - UserCreate accepts nulls and short values: the core decides, not Pydantic
    - UserResponse never carries the password

Design Decisions:
    - Only JSON shape is enforced here (types), business rules stay in core
"""

from pydantic import BaseModel, ConfigDict

from signup.core.user import User


class UserCreate(BaseModel):
    """Registration request — every field optional so missing-field rules reach the core."""
    id: int | str | None = None
    login: str | None = None
    password: str | None = None
    age: int | None = None

    def to_user(self) -> User:
        return User(
            id=self.id, login=self.login, password=self.password, age=self.age,
        )


class UserResponse(BaseModel):
    """Registered user — public-facing fields only."""
    model_config = ConfigDict(from_attributes=True)

    id: int | str | None
    login: str
    age: int
