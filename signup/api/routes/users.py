"""User Routes — registration and lookup over the process-wide store.

Invariants:
    - POST delegates every decision to the Registrar (no rules in the route)
    - An empty or null body reaches the core as a missing user
    - Responses never include the password

Design Decisions:
    - Sync handlers: FastAPI runs them in its threadpool, the Registrar lock
      serializes concurrent registrations against the same store
"""

import logging

from fastapi import APIRouter, Body, Depends, status

from signup.core.errors import ResourceNotFoundError
from signup.infrastructure.user_store import InMemoryUserStore, get_user_store
from signup.schemas.user import UserCreate, UserResponse
from signup.services.registrar import Registrar

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_registrar(store: InMemoryUserStore = Depends(get_user_store)) -> Registrar:
    return Registrar(store)


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    body: UserCreate | None = Body(None),
    registrar: Registrar = Depends(get_registrar),
):
    """Register a new user."""
    candidate = body.to_user() if body is not None else None
    return registrar.register(candidate)


@router.get("", response_model=list[UserResponse])
def list_users(store: InMemoryUserStore = Depends(get_user_store)):
    """All registered users, in registration order."""
    return store.all()


@router.get("/{login}", response_model=UserResponse)
def get_user(login: str, store: InMemoryUserStore = Depends(get_user_store)):
    """Look up a registered user by exact (trimmed) login."""
    user = store.get(login)
    if user is None:
        raise ResourceNotFoundError("User", login)
    return user
