"""Root conftest — shared test configuration and factories."""

import os

import pytest

from signup.core.user import User
from signup.infrastructure.user_store import InMemoryUserStore

# Keep tests independent of a developer's .env
os.environ.setdefault("SIGNUP_LOG_FORMAT", "text")

SAMPLE_USERS = (
    ("john_doe", "password123", 25),
    ("anna_smith", "qwerty456", 30),
    ("kate_miller", "passKate99", 27),
    ("lisa_white", "mySecret!", 19),
    ("tom_jackson", "jackson777", 40),
)


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def seeded_store():
    """Store pre-populated with a handful of registered users."""
    return InMemoryUserStore(
        User(id=i, login=login, password=password, age=age)
        for i, (login, password, age) in enumerate(SAMPLE_USERS, start=1)
    )
