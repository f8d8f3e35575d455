"""Domain Types — the rejection taxonomy shared by core, services and shell.

Invariants:
    - Every registration failure maps to exactly one RejectionKind
    - RejectionKind values double as public error codes (API envelope `code`)

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class RejectionKind(str, Enum):
    """Why a candidate was not registered. First failing check wins."""
    USER_MISSING = "USER_MISSING"
    LOGIN_MISSING = "LOGIN_MISSING"
    PASSWORD_MISSING = "PASSWORD_MISSING"
    AGE_MISSING = "AGE_MISSING"
    LOGIN_TOO_SHORT = "LOGIN_TOO_SHORT"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    AGE_INVALID = "AGE_INVALID"
    AGE_TOO_YOUNG = "AGE_TOO_YOUNG"
    DUPLICATE_LOGIN = "DUPLICATE_LOGIN"
