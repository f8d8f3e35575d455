"""Error Hierarchy — kind-to-exception mapping and REST envelope shape."""

from dataclasses import fields

import pytest

from signup.core.domain_types import RejectionKind
from signup.core.errors import (
    AgeTooYoungError,
    DuplicateLoginError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    LoginTooShortError,
    RegistrationError,
    Rejection,
    ResourceNotFoundError,
    SignupError,
    error_for,
)


@pytest.mark.parametrize("kind", list(RejectionKind))
def test_every_kind_has_an_error(kind):
    err = error_for(Rejection(kind, "nope"))
    assert isinstance(err, RegistrationError)
    assert err.kind == kind
    assert err.code == kind.value
    assert err.message == "nope"


def test_distinct_error_class_per_kind():
    classes = {type(error_for(Rejection(kind, "x"))) for kind in RejectionKind}
    assert len(classes) == len(RejectionKind)


def test_validation_errors_are_400():
    err = error_for(Rejection(RejectionKind.LOGIN_TOO_SHORT, "short"))
    assert isinstance(err, LoginTooShortError)
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.severity == ErrorSeverity.WARNING


def test_duplicate_login_is_409_conflict():
    err = error_for(Rejection(RejectionKind.DUPLICATE_LOGIN, "taken"))
    assert isinstance(err, DuplicateLoginError)
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT


def test_rejection_round_trips_through_error():
    rejection = Rejection(RejectionKind.AGE_TOO_YOUNG, "Your age: 12")
    err = error_for(rejection)
    assert isinstance(err, AgeTooYoungError)
    assert err.rejection == rejection


def test_to_response_envelope():
    err = error_for(
        Rejection(RejectionKind.DUPLICATE_LOGIN, "taken"),
        ErrorContext(login="john_doe"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "DUPLICATE_LOGIN"
    assert body["message"] == "taken"
    assert body["category"] == "conflict"
    assert body["severity"] == "warning"
    assert body["context"] == {"login": "john_doe"}
    assert "timestamp" in body


def test_resource_not_found():
    err = ResourceNotFoundError("User", "ghost_user")
    assert isinstance(err, SignupError)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert "ghost_user" in err.message


def test_errors_are_exceptions():
    with pytest.raises(SignupError):
        raise error_for(Rejection(RejectionKind.USER_MISSING, "User cannot be null"))


def test_error_context_carries_only_envelope_fields():
    assert [f.name for f in fields(ErrorContext)] == ["timestamp", "login"]
