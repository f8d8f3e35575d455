"""Error Hierarchy — typed, categorized exceptions for all registration failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Each RejectionKind has exactly one RegistrationError subclass
    - to_response() produces the REST envelope
    - Passwords never appear in messages or context

Design Decisions:
    - Core returns Rejection values; services raise these errors on top of the
      same taxonomy (error_for bridges the two)
    - ErrorContext as dataclass: observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from signup.core.domain_types import RejectionKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    login: str | None = None


@dataclass(frozen=True)
class Rejection:
    """Result of a failed registration check — kind plus human-readable message."""
    kind: RejectionKind
    message: str


class SignupError(Exception):
    """Base exception for all signup errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "login": self.context.login,
                },
            }
        }


# ─── Registration Errors (400/409) ──────────────────────────────

class RegistrationError(SignupError):
    """Candidate rejected by a registration rule."""

    kind: RejectionKind
    http_status_for_kind: int = 400
    category_for_kind: ErrorCategory = ErrorCategory.VALIDATION

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, self.kind.value, self.category_for_kind,
            ErrorSeverity.WARNING, context, self.http_status_for_kind,
        )

    @property
    def rejection(self) -> Rejection:
        return Rejection(self.kind, self.message)


class UserMissingError(RegistrationError):
    """No candidate was supplied."""
    kind = RejectionKind.USER_MISSING


class LoginMissingError(RegistrationError):
    """Candidate has no login."""
    kind = RejectionKind.LOGIN_MISSING


class PasswordMissingError(RegistrationError):
    """Candidate has no password."""
    kind = RejectionKind.PASSWORD_MISSING


class AgeMissingError(RegistrationError):
    """Candidate has no age."""
    kind = RejectionKind.AGE_MISSING


class LoginTooShortError(RegistrationError):
    """Trimmed login is blank or shorter than the minimum."""
    kind = RejectionKind.LOGIN_TOO_SHORT


class PasswordTooShortError(RegistrationError):
    """Trimmed password is blank or shorter than the minimum."""
    kind = RejectionKind.PASSWORD_TOO_SHORT


class AgeInvalidError(RegistrationError):
    """Age is negative or zero."""
    kind = RejectionKind.AGE_INVALID


class AgeTooYoungError(RegistrationError):
    """Age is below the registration minimum."""
    kind = RejectionKind.AGE_TOO_YOUNG


class DuplicateLoginError(RegistrationError):
    """Trimmed login is already registered."""
    kind = RejectionKind.DUPLICATE_LOGIN
    http_status_for_kind = 409
    category_for_kind = ErrorCategory.CONFLICT


_ERRORS_BY_KIND: dict[RejectionKind, type[RegistrationError]] = {
    cls.kind: cls
    for cls in (
        UserMissingError, LoginMissingError, PasswordMissingError,
        AgeMissingError, LoginTooShortError, PasswordTooShortError,
        AgeInvalidError, AgeTooYoungError, DuplicateLoginError,
    )
}


def error_for(
    rejection: Rejection, context: ErrorContext | None = None,
) -> RegistrationError:
    """Build the exception matching a rejection (same kind, same message)."""
    return _ERRORS_BY_KIND[rejection.kind](rejection.message, context)


# ─── Lookup Errors (404) ────────────────────────────────────────

class ResourceNotFoundError(SignupError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
