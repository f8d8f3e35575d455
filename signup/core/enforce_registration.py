"""Registration Enforcement — ordered, pure checks over a candidate user.

Invariants:
    - validate_registration is PURE: returns a Rejection or None, never mutates the candidate
    - Checks run in a fixed order and the first failure wins
    - Length and blank checks apply to the trimmed login/password
    - MIN_LOGIN_LENGTH, MIN_PASSWORD_LENGTH, MIN_AGE are the single source of truth

Design Decisions:
    - Age 18 is rejected: the minimum is strictly greater than 18
    - Uniqueness is NOT checked here: it needs the store, so the registrar owns it
"""

from signup.core.domain_types import RejectionKind
from signup.core.errors import Rejection
from signup.core.user import User


MIN_LOGIN_LENGTH: int = 6
MIN_PASSWORD_LENGTH: int = 6
MIN_AGE: int = 19


def trim_credentials(candidate: User) -> tuple[str, str]:
    """Login and password with surrounding whitespace removed. Both must be non-null."""
    return candidate.login.strip(), candidate.password.strip()


def validate_registration(candidate: User | None) -> Rejection | None:
    """Run every registration rule in order. Pure — no state mutation."""
    missing = _check_required_fields(candidate)
    if missing:
        return missing

    login, password = trim_credentials(candidate)
    return _check_credentials(login, password) or _check_age(candidate.age)


def duplicate_login(login: str) -> Rejection:
    """Rejection for a login that is already registered."""
    return Rejection(
        RejectionKind.DUPLICATE_LOGIN,
        f"User with login '{login}' already exists",
    )


def _check_required_fields(candidate: User | None) -> Rejection | None:
    if candidate is None:
        return Rejection(RejectionKind.USER_MISSING, "User cannot be null")
    if candidate.login is None:
        return Rejection(RejectionKind.LOGIN_MISSING, "Login is required")
    if candidate.password is None:
        return Rejection(RejectionKind.PASSWORD_MISSING, "Password is required")
    if candidate.age is None:
        return Rejection(RejectionKind.AGE_MISSING, "Age is required")
    return None


def _check_credentials(login: str, password: str) -> Rejection | None:
    """Blank checks for both fields run before either length check."""
    if not login:
        return Rejection(RejectionKind.LOGIN_TOO_SHORT, "Login cannot be empty or whitespace")
    if not password:
        return Rejection(RejectionKind.PASSWORD_TOO_SHORT, "Password cannot be empty or whitespace")
    if len(login) < MIN_LOGIN_LENGTH:
        return Rejection(
            RejectionKind.LOGIN_TOO_SHORT,
            f"Login must have at least {MIN_LOGIN_LENGTH} characters. Yours has: {len(login)}",
        )
    if len(password) < MIN_PASSWORD_LENGTH:
        return Rejection(
            RejectionKind.PASSWORD_TOO_SHORT,
            f"Password must have at least {MIN_PASSWORD_LENGTH} characters. Yours has: {len(password)}",
        )
    return None


def _check_age(age: int) -> Rejection | None:
    if age < 0:
        return Rejection(RejectionKind.AGE_INVALID, f"Age cannot be negative. Your age: {age}")
    if age == 0:
        return Rejection(RejectionKind.AGE_INVALID, "Age cannot be zero")
    if age < MIN_AGE:
        return Rejection(
            RejectionKind.AGE_TOO_YOUNG,
            f"Age must be greater than {MIN_AGE - 1}. Your age: {age}",
        )
    return None
